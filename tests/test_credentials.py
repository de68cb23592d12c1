"""Tests for the credential store: registration, uniqueness, and indistinguishable login failures."""

import unittest

from tests.support import DatabaseTestCase
from tracker.core.errors import DuplicateEmailError, InvalidCredentialsError
from tracker.core.permissions import Role
from tracker.models import User
from tracker.services import credentials


class TestRegister(DatabaseTestCase):
    def test_distinct_emails_get_distinct_ids(self) -> None:
        ids = {
            credentials.register(self.db, f"user{i}", f"user{i}@x.com", "password123").id
            for i in range(5)
        }
        self.assertEqual(len(ids), 5)

    def test_defaults_to_employee(self) -> None:
        user = credentials.register(self.db, "Bob", "bob@x.com", "password123")
        self.assertEqual(user.role, Role.EMPLOYEE.value)

    def test_role_is_stored(self) -> None:
        user = credentials.register(self.db, "Alice", "alice@x.com", "password123", Role.MANAGER)
        self.assertEqual(user.role, "manager")

    def test_password_is_hashed(self) -> None:
        user = credentials.register(self.db, "Bob", "bob@x.com", "password123")
        self.assertNotEqual(user.password_hash, "password123")
        self.assertTrue(user.password_hash.startswith("$2"))

    def test_duplicate_email_fails_regardless_of_other_fields(self) -> None:
        credentials.register(self.db, "Alice", "alice@x.com", "password123", Role.ADMIN)
        with self.assertRaises(DuplicateEmailError):
            credentials.register(self.db, "Someone Else", "alice@x.com", "different-pass", Role.EMPLOYEE)
        self.assertEqual(self.db.query(User).filter(User.email == "alice@x.com").count(), 1)

    def test_session_usable_after_duplicate(self) -> None:
        credentials.register(self.db, "Alice", "alice@x.com", "password123")
        with self.assertRaises(DuplicateEmailError):
            credentials.register(self.db, "Alice", "alice@x.com", "password123")
        user = credentials.register(self.db, "Carol", "carol@x.com", "password123")
        self.assertIsNotNone(user.id)

    def test_email_is_case_sensitive_as_stored(self) -> None:
        credentials.register(self.db, "Alice", "alice@x.com", "password123")
        other = credentials.register(self.db, "Alice", "Alice@x.com", "password123")
        self.assertIsNotNone(other.id)


class TestVerify(DatabaseTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.user = credentials.register(self.db, "Alice", "alice@x.com", "password123")

    def test_correct_credentials(self) -> None:
        self.assertEqual(credentials.verify(self.db, "alice@x.com", "password123").id, self.user.id)

    def test_unknown_email_and_wrong_password_are_indistinguishable(self) -> None:
        with self.assertRaises(InvalidCredentialsError) as unknown:
            credentials.verify(self.db, "nobody@x.com", "password123")
        with self.assertRaises(InvalidCredentialsError) as wrong:
            credentials.verify(self.db, "alice@x.com", "wrong-password")
        self.assertIs(type(unknown.exception), type(wrong.exception))
        self.assertEqual(unknown.exception.message, wrong.exception.message)
        self.assertEqual(unknown.exception.code, wrong.exception.code)

    def test_verify_has_no_side_effects(self) -> None:
        before = self.db.query(User).count()
        credentials.verify(self.db, "alice@x.com", "password123")
        self.assertEqual(self.db.query(User).count(), before)


if __name__ == "__main__":
    unittest.main()
