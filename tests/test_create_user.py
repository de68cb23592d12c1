"""Tests for the create_user operator CLI."""

import unittest
from unittest.mock import patch

from tests.support import DatabaseTestCase
from tracker.models import User
from tracker.scripts import create_user


class TestCreateUserCli(DatabaseTestCase):
    def setUp(self) -> None:
        super().setUp()
        patcher = patch.object(create_user, "SessionLocal", self.SessionTesting)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_creates_admin(self) -> None:
        code = create_user.main(["Ada", "ada@x.com", "long-enough-pw", "admin"])
        self.assertEqual(code, 0)
        user = self.db.query(User).filter(User.email == "ada@x.com").one()
        self.assertEqual(user.role, "admin")
        self.assertEqual(user.name, "Ada")

    def test_defaults_to_employee(self) -> None:
        self.assertEqual(create_user.main(["Bob", "bob@x.com", "long-enough-pw"]), 0)
        self.assertEqual(self.db.query(User).one().role, "employee")

    def test_duplicate_email(self) -> None:
        self.assertEqual(create_user.main(["Ada", "ada@x.com", "long-enough-pw"]), 0)
        with patch("sys.stderr"):
            self.assertEqual(create_user.main(["Ada 2", "ada@x.com", "long-enough-pw"]), 1)
        self.assertEqual(self.db.query(User).count(), 1)

    def test_rejects_short_password(self) -> None:
        with patch("sys.stderr"):
            self.assertEqual(create_user.main(["Ada", "ada@x.com", "short"]), 1)
        self.assertEqual(self.db.query(User).count(), 0)

    def test_rejects_unknown_role(self) -> None:
        with patch("sys.stderr"), self.assertRaises(SystemExit):
            create_user.main(["Ada", "ada@x.com", "long-enough-pw", "owner"])


if __name__ == "__main__":
    unittest.main()
