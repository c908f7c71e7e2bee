from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.web import current_identity, json_body, login_required
from ..core.constants import API_PREFIX
from ..core.exceptions import InternalError
from ..container import Container
from .identity import SESSION_KEY


def register(app: Flask, container: Container) -> None:
    @app.route(f"{API_PREFIX}/register", methods=["POST"], endpoint="register")
    def register_user():
        data = json_body()
        user_id = container.auth_service.register(
            username=data.get("username"),
            password=data.get("password"),
            first_name=data.get("firstName"),
            last_name=data.get("lastName"),
            email=data.get("email"),
        )
        return jsonify({"message": "User registered successfully", "userId": user_id}), 201

    @app.route(f"{API_PREFIX}/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        identity, profile = container.auth_service.login(data.get("username"), data.get("password"))

        session.clear()
        session.permanent = True
        session[SESSION_KEY] = identity.to_session()

        return jsonify({"message": "Login successful", "user": profile})

    @app.route(f"{API_PREFIX}/logout", methods=["POST"], endpoint="logout")
    def logout():
        try:
            session.clear()
        except Exception as e:
            raise InternalError("Logout failed") from e
        return jsonify({"message": "Logout successful"})

    @app.route(f"{API_PREFIX}/user", methods=["GET"], endpoint="current_user")
    @login_required
    def current_user():
        return jsonify(container.auth_service.get_profile(current_identity()))
