from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

import mysql.connector
from mysql.connector import pooling

from ..core.constants import DEFAULT_POOL_SIZE, POOL_NAME, POOL_WAIT_SECONDS
from ..core.exceptions import InternalError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_size: int = DEFAULT_POOL_SIZE


class DatabaseConnection:
    """Pooled connection factory with a readiness gate.

    Constructed once by the container and injected into every repository.
    The pool is opened explicitly (``open``); until then ``is_ready`` is False
    and the request layer answers 503.

    ``MySQLConnectionPool.get_connection`` fails at once when the pool is
    exhausted, so borrowers queue on a semaphore sized like the pool and wait
    up to ``wait_seconds`` for a free connection.
    """

    def __init__(self, config: DBConfig, *, wait_seconds: float = POOL_WAIT_SECONDS):
        self._config = config
        self._wait_seconds = wait_seconds
        self._pool: Optional[pooling.MySQLConnectionPool] = None
        self._slots = threading.BoundedSemaphore(int(config.pool_size))

    @property
    def config(self) -> DBConfig:
        return self._config

    @property
    def is_ready(self) -> bool:
        return self._pool is not None

    def open(self) -> None:
        if self._pool is not None:
            return
        self._pool = pooling.MySQLConnectionPool(
            pool_name=POOL_NAME,
            pool_size=int(self._config.pool_size),
            host=self._config.host,
            port=int(self._config.port),
            user=self._config.user,
            password=self._config.password,
            database=self._config.database,
        )
        logger.info(
            "Connection pool ready: %s@%s:%s/%s (size=%s)",
            self._config.user,
            self._config.host,
            self._config.port,
            self._config.database,
            self._config.pool_size,
        )

    def ensure_ready(self) -> bool:
        """Open the pool if needed; False when the server is unreachable."""
        if self.is_ready:
            return True
        try:
            self.open()
        except mysql.connector.Error as e:
            logger.warning("Database not ready: %s", e)
            return False
        return True

    @contextmanager
    def connect(self) -> Iterator:
        """Borrow a pooled connection, waiting while all of them are in use."""
        if self._pool is None:
            self.open()
        if not self._slots.acquire(timeout=self._wait_seconds):
            logger.error("No pooled connection freed up within %ss", self._wait_seconds)
            raise InternalError("Database is busy, please try again")
        try:
            conn = self._pool.get_connection()
            try:
                yield conn
            finally:
                # Pooled connections go back to the pool on close().
                conn.close()
        finally:
            self._slots.release()
