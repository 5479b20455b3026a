"""
models/employee.py
------------------
Domain model for employee records.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Employee:
    """
    Represents a single employee record.

    Attributes:
        id: Database primary key (None for new records).
        first_name: Given name, required.
        last_name: Family name, required.
        email: Contact email, unique across employees.
    """
    first_name: str
    last_name: str
    email: str
    id: Optional[int] = None

    @classmethod
    def builder(cls) -> "EmployeeBuilder":
        """Start a fluent builder, handy for fixtures."""
        return EmployeeBuilder()

    def to_dict(self) -> dict:
        """JSON representation exposed over HTTP."""
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
        }

    def __str__(self) -> str:
        return f"#{self.id} {self.first_name} {self.last_name} <{self.email}>"


class EmployeeBuilder:
    """Fluent constructor for Employee."""

    def __init__(self):
        self._fields: dict = {}

    def id(self, value: int) -> "EmployeeBuilder":
        self._fields["id"] = value
        return self

    def first_name(self, value: str) -> "EmployeeBuilder":
        self._fields["first_name"] = value
        return self

    def last_name(self, value: str) -> "EmployeeBuilder":
        self._fields["last_name"] = value
        return self

    def email(self, value: str) -> "EmployeeBuilder":
        self._fields["email"] = value
        return self

    def build(self) -> Employee:
        # Unset fields stay None, as the storage layer is the one enforcing NOT NULL
        return Employee(
            first_name=self._fields.get("first_name"),
            last_name=self._fields.get("last_name"),
            email=self._fields.get("email"),
            id=self._fields.get("id"),
        )
