from __future__ import annotations

from typing import Optional, Protocol

from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note: the service layer depends on this interface, not on a concrete DB.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def exists_username_or_email(self, *, username: str, email: str) -> bool:
        raise NotImplementedError

    def create_user(
        self,
        *,
        username: str,
        password_hash: str,
        first_name: str,
        last_name: str,
        email: str,
    ) -> int:
        """Insert a user; raises ConflictError on a duplicate username/email."""

        raise NotImplementedError
