from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

SESSION_KEY = "identity"


@dataclass(frozen=True)
class Identity:
    """Who is calling: stored in the session at login, read back per request."""

    user_id: int
    username: str

    def to_session(self) -> dict:
        return {"user_id": self.user_id, "username": self.username}

    @classmethod
    def from_session(cls, session: Mapping[str, Any]) -> Optional["Identity"]:
        data = session.get(SESSION_KEY)
        if not isinstance(data, Mapping):
            return None
        try:
            return cls(user_id=int(data["user_id"]), username=str(data["username"]))
        except (KeyError, TypeError, ValueError):
            return None
