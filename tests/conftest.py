from __future__ import annotations

from datetime import date

import pytest

from employee_management.common import datetime_utils
from employee_management.main import create_app

from fakes import FakeConnection, InMemoryDatabase, build_memory_container

TESTING_SETTINGS = "employee_management.settings.testing"


@pytest.fixture
def fixed_today(monkeypatch):
    today = date(2024, 6, 15)
    monkeypatch.setattr(datetime_utils, "today", lambda: today)
    return today


@pytest.fixture
def memory_db():
    return InMemoryDatabase()


@pytest.fixture
def db_conn():
    return FakeConnection(ready=True)


@pytest.fixture
def container(memory_db, db_conn):
    return build_memory_container(memory_db, db_conn)


@pytest.fixture
def app(container):
    return create_app(TESTING_SETTINGS, container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_client(client):
    client.post(
        "/api/register",
        json={
            "username": "hr",
            "password": "secret-pw",
            "firstName": "Hana",
            "lastName": "Reyes",
            "email": "hr@example.com",
        },
    )
    resp = client.post("/api/login", json={"username": "hr", "password": "secret-pw"})
    assert resp.status_code == 200
    return client
