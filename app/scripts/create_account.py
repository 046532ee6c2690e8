"""
Create an account (e.g. the first admin). Run from project root:
  python -m app.scripts.create_account CORREO PASSWORD [role] [--nombre NAME]
Example:
  python -m app.scripts.create_account admin@example.com your-secure-password admin
"""
import argparse
import logging
import sys

from pydantic import ValidationError

from app.core.config import get_settings
from app.core.database import create_database
from app.core.errors import DuplicateCredentialField
from app.core.policy import Role
from app.schemas.accounts import AccountCreate
from app.services.account_store import AccountStore
from app.services.accounts import create_account

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create an account (there is no self-registration).")
    parser.add_argument("correo", help="Login email (3-255 chars)")
    parser.add_argument("password", help="Password (8-128 chars)")
    parser.add_argument(
        "role",
        nargs="?",
        default=Role.STANDARD.value,
        choices=[r.value for r in Role],
    )
    parser.add_argument("--nombre", default=None, help="Display name (defaults to correo)")
    args = parser.parse_args(argv)

    try:
        body = AccountCreate(
            nombre=args.nombre or args.correo,
            correo=args.correo,
            password=args.password,
            rol=Role(args.role),
        )
    except ValidationError as e:
        for err in e.errors():
            field = ".".join(str(p) for p in err["loc"])
            print(f"Invalid {field}: {err['msg']}", file=sys.stderr)
        return 1

    settings = get_settings()
    database = create_database(settings.DATABASE_URL, echo=settings.DEBUG)
    db = database.session()
    try:
        account = create_account(AccountStore(db), body)
        print(f"Created account '{account.correo}' with role '{account.rol.value}'.")
        return 0
    except DuplicateCredentialField:
        print(f"Account '{body.correo}' already exists.", file=sys.stderr)
        return 1
    finally:
        db.close()
        database.dispose()


if __name__ == "__main__":
    sys.exit(main())
