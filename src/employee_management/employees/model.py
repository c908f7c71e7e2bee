from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class EmployeeData:
    """Validated input for create/update."""

    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None
    position: Optional[str] = None
    department: Optional[str] = None
    hire_date: Optional[date] = None


@dataclass(frozen=True)
class Employee:
    id: int
    first_name: str
    last_name: str
    email: str
    phone: Optional[str]
    address: Optional[str]
    position: Optional[str]
    department: Optional[str]
    hire_date: Optional[date]
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "phone": self.phone,
            "address": self.address,
            "position": self.position,
            "department": self.department,
            "hire_date": self.hire_date.isoformat() if self.hire_date else None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
