from __future__ import annotations

import logging

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_fields
from ..core.exceptions import AuthenticationError, ConflictError, NotFoundError, ValidationError
from .identity import Identity
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


class AuthService:
    """Use cases: register, login, current user."""

    def __init__(self, users: UserRepository):
        self._users = users

    def register(self, *, username: str, password: str, first_name: str, last_name: str, email: str) -> int:
        require_fields(
            {
                "username": username,
                "password": password,
                "firstName": first_name,
                "lastName": last_name,
                "email": email,
            },
            ("username", "password", "firstName", "lastName", "email"),
            "All fields are required",
        )
        username = str(username).strip()
        email = str(email).strip()

        if self._users.exists_username_or_email(username=username, email=email):
            raise ConflictError("Username or email already exists")

        user_id = self._users.create_user(
            username=username,
            password_hash=generate_password_hash(str(password)),
            first_name=str(first_name).strip(),
            last_name=str(last_name).strip(),
            email=email,
        )
        logger.info("Registered user %s (id=%s)", username, user_id)
        return user_id

    def authenticate(self, username: str, password: str) -> User:
        if not username or not password:
            raise ValidationError("Username and password are required")

        user = self._users.get_by_username(str(username).strip())
        if not user:
            raise AuthenticationError(INVALID_CREDENTIALS)

        try:
            ok = check_password_hash(user.password_hash, str(password))
        except ValueError:
            # e.g. placeholder or corrupted hash values
            ok = False

        if not ok:
            raise AuthenticationError(INVALID_CREDENTIALS)
        return user

    def login(self, username: str, password: str) -> tuple[Identity, dict]:
        user = self.authenticate(username, password)
        logger.info("User %s logged in", user.username)
        return Identity(user_id=user.id, username=user.username), user.to_profile()

    def get_profile(self, identity: Identity) -> dict:
        user = self._users.get_by_id(identity.user_id)
        if not user:
            raise NotFoundError("User not found")
        return user.to_profile()
