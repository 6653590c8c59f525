"""Credential store: seeded user accounts, read-only at runtime."""

from collections.abc import Iterable

from storefront.models.user import Role, User

DEFAULT_USERS: tuple[User, ...] = (
    User(id=1, email="admin@test.com", password="1234", role=Role.ADMIN),
    User(id=2, email="user@test.com", password="1234", role=Role.USER),
)


class CredentialStore:
    """Immutable collection of users; safe to share between threads without locking."""

    def __init__(self, users: Iterable[User] = DEFAULT_USERS) -> None:
        self._users = tuple(users)
        emails = [u.email for u in self._users]
        if len(emails) != len(set(emails)):
            raise ValueError("User emails must be unique")

    def find_by_credentials(self, email: str, password: str) -> User | None:
        """Return the user matching both email and password exactly, else None."""
        for user in self._users:
            if user.email == email and user.password == password:
                return user
        return None

    def __len__(self) -> int:
        return len(self._users)
