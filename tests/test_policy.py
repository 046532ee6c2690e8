"""Unit tests for app.core.policy.can_perform: admin writes, every role reads."""

import unittest

from app.core.policy import Action, Role, can_perform

MUTATING = [
    Action.CREATE_ACCOUNT,
    Action.UPDATE_ACCOUNT,
    Action.DELETE_ACCOUNT,
    Action.CREATE_ITEM,
    Action.UPDATE_ITEM,
    Action.DELETE_ITEM,
]


class TestCanPerform(unittest.TestCase):
    def test_standard_cannot_delete_item(self) -> None:
        self.assertFalse(can_perform("standard", "delete-item"))

    def test_admin_can_delete_item(self) -> None:
        self.assertTrue(can_perform("admin", "delete-item"))

    def test_every_role_can_read(self) -> None:
        for role in Role:
            self.assertTrue(can_perform(role, Action.READ_ITEM), role)
            self.assertTrue(can_perform(role, Action.READ_ACCOUNT), role)

    def test_admin_can_perform_every_mutation(self) -> None:
        for action in MUTATING:
            self.assertTrue(can_perform(Role.ADMIN, action), action)

    def test_standard_cannot_perform_any_mutation(self) -> None:
        for action in MUTATING:
            self.assertFalse(can_perform(Role.STANDARD, action), action)

    def test_unknown_role_denied(self) -> None:
        self.assertFalse(can_perform("superuser", Action.READ_ITEM))
        self.assertFalse(can_perform(None, Action.READ_ITEM))
        self.assertFalse(can_perform("", Action.DELETE_ITEM))

    def test_unknown_action_denied(self) -> None:
        self.assertFalse(can_perform(Role.ADMIN, "drop-database"))


if __name__ == "__main__":
    unittest.main()
