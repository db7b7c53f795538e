"""Admin Seed Command - create the configured administrator account once.

Usage:
    ADMIN_PASSWORD=... python -m club_api.seed_admin [--email EMAIL]

Invariants:
    - Credentials come from settings (ADMIN_EMAIL / ADMIN_PASSWORD ...), never hardcoded
    - Exit code 0 on creation, 1 when the admin exists or no password is configured
    - The password is never logged or printed
"""

import argparse
import asyncio
import logging
import sys

from club_api.config import Settings, get_settings
from club_api.core.errors import ConflictError
from club_api.db.session import create_session_factory
from club_api.infrastructure.data_access import DataAccess
from club_api.infrastructure.observability import setup_logging
from club_api.services.user_service import UserService

logger = logging.getLogger("club_api.seed_admin")


async def seed(settings: Settings, email: str | None = None, session_factory=None) -> int:
    """Run the seed against the configured database. Returns the process exit code."""
    if not settings.admin_password:
        logger.error("ADMIN_PASSWORD is not set; refusing to create an admin without a password")
        return 1

    factory = session_factory or create_session_factory(settings.database_url)
    async with factory() as session:
        service = UserService(DataAccess(session), bcrypt_rounds=settings.bcrypt_rounds)
        try:
            admin = await service.seed_admin(
                email or settings.admin_email,
                settings.admin_password,
                settings.admin_first_name,
                settings.admin_last_name,
            )
        except ConflictError as e:
            if e.data:
                logger.warning(f"{e.message}: {e.data['email']} ({e.data['id']})")
            else:
                logger.warning(e.message)
            return 1

    logger.info(f"Admin user ready: {admin['email']} (ID: {admin['id']})")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create the club administrator account.")
    parser.add_argument("--email", help="override ADMIN_EMAIL")
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    return asyncio.run(seed(settings, args.email))


if __name__ == "__main__":
    sys.exit(main())
