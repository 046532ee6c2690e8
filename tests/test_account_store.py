"""Store and account-service tests against an in-memory SQLite database."""

import unittest
from types import SimpleNamespace
from unittest.mock import MagicMock

from sqlalchemy.exc import IntegrityError, OperationalError

from app.core.database import create_database
from app.core.errors import DuplicateCredentialField, NotFound
from app.core.policy import Role
from app.core.security import verify_password
from app.models import Account, Item
from app.schemas.accounts import AccountCreate, AccountUpdate
from app.services.account_store import CORREO_UNIQUE_INDEX, AccountStore, _is_correo_conflict
from app.services.accounts import create_account, delete_account, update_account
from app.services.item_store import ItemStore


class StoreTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.database = create_database("sqlite://")
        self.database.create_all()
        self.session = self.database.session()
        self.addCleanup(self.database.dispose)
        self.addCleanup(self.session.close)
        self.store = AccountStore(self.session)


class TestAccountStore(StoreTestCase):
    def test_save_assigns_opaque_id(self) -> None:
        saved = self.store.save(Account(nombre="Ana", correo="ana@example.com", password_hash="x", rol=Role.ADMIN))
        self.assertTrue(saved.id)
        self.assertEqual(self.store.find_by_id(saved.id).correo, "ana@example.com")

    def test_find_by_unique_field(self) -> None:
        saved = self.store.save(Account(nombre="Ana", correo="ana@example.com", password_hash="x", rol=Role.ADMIN))
        self.assertEqual(self.store.find_by_unique_field("correo", "ana@example.com").id, saved.id)
        self.assertIsNone(self.store.find_by_unique_field("correo", "other@example.com"))

    def test_find_by_non_unique_field_rejected(self) -> None:
        with self.assertRaises(ValueError):
            self.store.find_by_unique_field("nombre", "Ana")

    def test_duplicate_correo_is_distinct_error(self) -> None:
        self.store.save(Account(nombre="Ana", correo="ana@example.com", password_hash="x", rol=Role.ADMIN))
        with self.assertRaises(DuplicateCredentialField):
            self.store.save(Account(nombre="Other", correo="ana@example.com", password_hash="y", rol=Role.STANDARD))
        # Session is usable after the rollback.
        self.assertEqual(len(self.store.list_all()), 1)

    def test_update_missing_returns_none(self) -> None:
        self.assertIsNone(self.store.update("missing", {"nombre": "x"}))

    def test_update_rejects_unknown_fields(self) -> None:
        with self.assertRaises(ValueError):
            self.store.update("missing", {"id": "new"})

    def test_delete(self) -> None:
        saved = self.store.save(Account(nombre="Ana", correo="ana@example.com", password_hash="x", rol=Role.ADMIN))
        self.assertTrue(self.store.delete(saved.id))
        self.assertFalse(self.store.delete(saved.id))
        self.assertIsNone(self.store.find_by_id(saved.id))


class TestAccountService(StoreTestCase):
    def _create(self, correo: str = "ana@example.com") -> Account:
        return create_account(
            self.store,
            AccountCreate(nombre="Ana", correo=correo, password="s3cret-password", rol=Role.STANDARD),
        )

    def test_create_hashes_password(self) -> None:
        account = self._create()
        self.assertNotEqual(account.password_hash, "s3cret-password")
        self.assertTrue(verify_password("s3cret-password", account.password_hash))

    def test_create_duplicate(self) -> None:
        self._create()
        with self.assertRaises(DuplicateCredentialField):
            self._create()

    def test_update_without_password_keeps_hash(self) -> None:
        account = self._create()
        original_hash = account.password_hash
        updated = update_account(self.store, account.id, AccountUpdate(nombre="Ana María"))
        self.assertEqual(updated.nombre, "Ana María")
        self.assertEqual(updated.password_hash, original_hash)

    def test_update_with_password_rehashes(self) -> None:
        account = self._create()
        updated = update_account(self.store, account.id, AccountUpdate(password="another-password"))
        self.assertTrue(verify_password("another-password", updated.password_hash))
        self.assertFalse(verify_password("s3cret-password", updated.password_hash))

    def test_update_to_taken_correo(self) -> None:
        self._create("ana@example.com")
        other = self._create("luis@example.com")
        with self.assertRaises(DuplicateCredentialField):
            update_account(self.store, other.id, AccountUpdate(correo="ana@example.com"))

    def test_update_missing(self) -> None:
        with self.assertRaises(NotFound):
            update_account(self.store, "missing", AccountUpdate(nombre="x"))

    def test_empty_update_of_missing(self) -> None:
        with self.assertRaises(NotFound):
            update_account(self.store, "missing", AccountUpdate())

    def test_delete_missing(self) -> None:
        with self.assertRaises(NotFound):
            delete_account(self.store, "missing")


class TestItemStore(StoreTestCase):
    def test_crud(self) -> None:
        items = ItemStore(self.session)
        saved = items.save(
            Item(nombre="Café", descripcion="Tostado", precio=4.5, stock=3, categoria="bebidas")
        )
        self.assertEqual([i.id for i in items.list_all()], [saved.id])
        updated = items.update(saved.id, {"stock": 10})
        self.assertEqual(updated.stock, 10)
        self.assertEqual(updated.precio, 4.5)
        self.assertTrue(items.delete(saved.id))
        self.assertIsNone(items.find_by_id(saved.id))
        self.assertIsNone(items.update(saved.id, {"stock": 1}))

    def test_stock_defaults_to_zero(self) -> None:
        items = ItemStore(self.session)
        saved = items.save(Item(nombre="Té", descripcion="Verde", precio=2.0, categoria="bebidas"))
        self.assertEqual(saved.stock, 0)


class _DriverError(Exception):
    """Stand-in for a DBAPI error; diag mimics psycopg2's Diagnostics."""

    def __init__(self, message: str, constraint_name: str | None = None) -> None:
        super().__init__(message)
        if constraint_name is not None:
            self.diag = SimpleNamespace(constraint_name=constraint_name)


def _integrity_error(message: str, constraint_name: str | None = None) -> IntegrityError:
    return IntegrityError("INSERT INTO usuarios", {}, _DriverError(message, constraint_name))


class TestCorreoConflictDetection(unittest.TestCase):
    def test_constraint_name_without_column_in_message(self) -> None:
        err = _integrity_error("duplicate key value violates unique constraint", CORREO_UNIQUE_INDEX)
        self.assertTrue(_is_correo_conflict(err))

    def test_other_constraint_name(self) -> None:
        err = _integrity_error("correo mentioned but another constraint", "pk_usuarios")
        self.assertFalse(_is_correo_conflict(err))

    def test_sqlite_message_fallback(self) -> None:
        self.assertTrue(_is_correo_conflict(_integrity_error("UNIQUE constraint failed: usuarios.correo")))
        self.assertFalse(_is_correo_conflict(_integrity_error("NOT NULL constraint failed: usuarios.nombre")))

    def test_store_maps_named_constraint_to_duplicate(self) -> None:
        session = MagicMock()
        session.commit.side_effect = _integrity_error("duplicate key", CORREO_UNIQUE_INDEX)
        store = AccountStore(session)
        with self.assertRaises(DuplicateCredentialField):
            store.save(Account(nombre="Ana", correo="ana@example.com", password_hash="x", rol=Role.ADMIN))
        session.rollback.assert_called_once()

    def test_store_rolls_back_other_failures(self) -> None:
        session = MagicMock()
        session.commit.side_effect = OperationalError("UPDATE usuarios", {}, Exception("connection lost"))
        session.get.return_value = Account(
            id="acc-1", nombre="Ana", correo="ana@example.com", password_hash="x", rol=Role.ADMIN
        )
        store = AccountStore(session)
        with self.assertRaises(OperationalError):
            store.update("acc-1", {"nombre": "Ana María"})
        session.rollback.assert_called_once()


if __name__ == "__main__":
    unittest.main()
