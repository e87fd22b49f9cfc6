"""
Grant or revoke the admin role for an account.

    python -m app.scripts.set_account_role <user_id> admin
"""
import argparse
import logging

from app.core.config import settings
from app.core.database import create_db_engine, create_session_factory
from app.services.account_service import AccountService

logger = logging.getLogger(__name__)

ROLES = ("admin", "user")


def set_account_role(user_id: str, role: str, database_url: str = settings.DATABASE_URL) -> bool:
    engine = create_db_engine(database_url)
    db = create_session_factory(engine)()
    try:
        account = AccountService(db).set_role(user_id, role)
    finally:
        db.close()
        engine.dispose()

    if account is None:
        logger.error("No account for user %s; the user has to sign in once first", user_id)
        return False
    logger.info("Account %s now has role %s", user_id, role)
    return True


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("user_id", help="External identity provider user id")
    parser.add_argument("role", choices=ROLES)
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.LOG_LEVEL.upper())
    return 0 if set_account_role(args.user_id, args.role) else 1


if __name__ == "__main__":
    raise SystemExit(main())
