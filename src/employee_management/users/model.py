from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Note: plain data object, no database access.
    """

    id: int
    username: str
    password_hash: str
    first_name: str
    last_name: str
    email: str

    def to_profile(self) -> dict:
        """Public profile, never includes the password hash."""
        return {
            "id": self.id,
            "username": self.username,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
        }
