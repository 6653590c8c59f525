"""User accounts, roles, and the verified caller identity."""

from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    """Coarse permission label used for route gating."""

    ADMIN = "admin"
    USER = "user"


@dataclass(frozen=True)
class User:
    """
    Seeded user account for login and role-based access control.

    password is stored as plain text; credential hardening is out of scope.
    """

    id: int
    email: str
    password: str
    role: Role


@dataclass(frozen=True)
class Identity:
    """Caller identity recovered from a verified bearer token."""

    subject_id: int
    role: Role
