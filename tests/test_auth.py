"""Unit tests for the login flow and the role-based authorization guard."""

import unittest

from storefront.core.errors import ForbiddenError, InvalidInputError, LoginFailedError
from storefront.models.user import Identity, Role, User
from storefront.services.auth import login
from storefront.services.authorization import (
    ADMIN_ROLES,
    CUSTOMER_ROLES,
    authorize,
    ensure_role,
)
from storefront.stores.users import DEFAULT_USERS, CredentialStore


class TestCredentialStore(unittest.TestCase):
    """CredentialStore matches on both fields exactly."""

    def setUp(self) -> None:
        self.store = CredentialStore()

    def test_seeded_users_match(self) -> None:
        for user in DEFAULT_USERS:
            with self.subTest(email=user.email):
                self.assertEqual(
                    self.store.find_by_credentials(user.email, user.password), user
                )

    def test_no_partial_matches(self) -> None:
        self.assertIsNone(self.store.find_by_credentials("admin@test.com", "4321"))
        self.assertIsNone(self.store.find_by_credentials("ADMIN@test.com", "1234"))
        self.assertIsNone(self.store.find_by_credentials("nobody@test.com", "1234"))

    def test_duplicate_emails_rejected(self) -> None:
        with self.assertRaises(ValueError):
            CredentialStore(
                [
                    User(id=1, email="a@test.com", password="x", role=Role.USER),
                    User(id=2, email="a@test.com", password="y", role=Role.ADMIN),
                ]
            )


class TestLogin(unittest.TestCase):
    """login returns the identity or raises a generic failure."""

    def setUp(self) -> None:
        self.store = CredentialStore()

    def test_admin_login(self) -> None:
        identity = login(self.store, "admin@test.com", "1234")
        self.assertEqual(identity, Identity(subject_id=1, role=Role.ADMIN))

    def test_user_login(self) -> None:
        identity = login(self.store, "user@test.com", "1234")
        self.assertEqual(identity, Identity(subject_id=2, role=Role.USER))

    def test_wrong_password_and_unknown_email_fail_the_same_way(self) -> None:
        with self.assertRaises(LoginFailedError) as wrong_password:
            login(self.store, "admin@test.com", "nope")
        with self.assertRaises(LoginFailedError) as unknown_email:
            login(self.store, "ghost@test.com", "1234")
        self.assertEqual(wrong_password.exception.message, unknown_email.exception.message)
        self.assertEqual(wrong_password.exception.http_status, 401)

    def test_missing_fields_are_invalid_input(self) -> None:
        for email, password in ((None, "1234"), ("admin@test.com", None), ("", ""), ("a", "")):
            with self.subTest(email=email, password=password):
                with self.assertRaises(InvalidInputError):
                    login(self.store, email, password)


class TestAuthorize(unittest.TestCase):
    """authorize is a pure membership test; ensure_role raises 403."""

    admin = Identity(subject_id=1, role=Role.ADMIN)
    user = Identity(subject_id=2, role=Role.USER)

    def test_membership(self) -> None:
        self.assertTrue(authorize(self.admin, ADMIN_ROLES))
        self.assertFalse(authorize(self.user, ADMIN_ROLES))
        self.assertTrue(authorize(self.user, CUSTOMER_ROLES))
        self.assertFalse(authorize(self.admin, CUSTOMER_ROLES))
        self.assertTrue(authorize(self.user, {Role.ADMIN, Role.USER}))

    def test_empty_role_set_denies_everyone(self) -> None:
        self.assertFalse(authorize(self.admin, frozenset()))
        self.assertFalse(authorize(self.user, frozenset()))

    def test_ensure_role_returns_identity_or_raises(self) -> None:
        self.assertIs(ensure_role(self.admin, ADMIN_ROLES), self.admin)
        with self.assertRaises(ForbiddenError) as ctx:
            ensure_role(self.user, ADMIN_ROLES)
        self.assertEqual(ctx.exception.http_status, 403)


if __name__ == "__main__":
    unittest.main()
