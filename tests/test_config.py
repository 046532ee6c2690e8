"""Settings validation: the service refuses to start without a signing secret or store URL."""

import os
import unittest
from unittest.mock import patch

from pydantic import ValidationError

from app.core.config import Settings

SECRET = "test-secret-key-that-is-long-enough-for-hs256-0123456789"


def _settings(**overrides: object) -> Settings:
    values: dict[str, object] = {"DATABASE_URL": "sqlite://", "JWT_SECRET": SECRET}
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestRequiredSettings(unittest.TestCase):
    @patch.dict(os.environ, {}, clear=True)
    def test_missing_jwt_secret(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, DATABASE_URL="sqlite://")

    @patch.dict(os.environ, {}, clear=True)
    def test_missing_database_url(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, JWT_SECRET=SECRET)

    def test_blank_jwt_secret(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JWT_SECRET="   ")

    def test_blank_database_url(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(DATABASE_URL=" ")

    def test_unsupported_database_url(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(DATABASE_URL="mongodb://localhost:27017/tienda")


class TestDefaults(unittest.TestCase):
    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self) -> None:
        s = _settings()
        self.assertEqual(s.JWT_ALGORITHM, "HS256")
        self.assertEqual(s.JWT_EXPIRE_MINUTES, 60)
        self.assertEqual(s.BCRYPT_ROUNDS, 12)
        self.assertEqual(s.API_PREFIX, "")

    def test_secret_not_in_repr(self) -> None:
        self.assertNotIn(SECRET, repr(_settings()))


class TestValidators(unittest.TestCase):
    def test_asymmetric_algorithm_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JWT_ALGORITHM="RS256")

    def test_algorithm_normalised(self) -> None:
        self.assertEqual(_settings(JWT_ALGORITHM=" hs512 ").JWT_ALGORITHM, "HS512")

    def test_expire_minutes_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JWT_EXPIRE_MINUTES=0)
        with self.assertRaises(ValidationError):
            _settings(JWT_EXPIRE_MINUTES=10081)

    def test_bcrypt_rounds_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(BCRYPT_ROUNDS=3)
        with self.assertRaises(ValidationError):
            _settings(BCRYPT_ROUNDS=32)

    def test_api_prefix(self) -> None:
        self.assertEqual(_settings(API_PREFIX="/api/").API_PREFIX, "/api")
        with self.assertRaises(ValidationError):
            _settings(API_PREFIX="api")


if __name__ == "__main__":
    unittest.main()
