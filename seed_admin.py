"""
Provision the administrator account on the hosted auth service.

Usage:
    python seed_admin.py [--email admin@optimrental.ch] [--password ...]

Needs SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY (environment or .env).
"""
import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from app.adapters.auth_adapter_interface import AuthAdapterInterface, AuthServiceError
from app.core.config import settings
from app.models.user import UserRole

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("seed_admin")


async def seed_admin(auth: AuthAdapterInterface, email: str, password: str) -> int:
    """Create the admin user. Returns the process exit code."""
    logger.info(f"Attempting to create admin user: {email}")

    try:
        user = await auth.create_user(
            email,
            password,
            email_confirm=True,
            user_metadata={"role": UserRole.ADMIN.value}
        )
    except AuthServiceError as e:
        logger.error(f"Error seeding admin: {e.message}")
        return 1

    logger.info(f"Admin user created successfully: {user.email}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Create the Optimrental admin user")
    parser.add_argument("--email", default=settings.ADMIN_EMAIL)
    parser.add_argument("--password", default=settings.ADMIN_PASSWORD)
    args = parser.parse_args(argv)

    if settings.AUTH_ADAPTER_TYPE == "supabase":
        if not settings.SUPABASE_URL or not settings.SUPABASE_SERVICE_ROLE_KEY:
            logger.error("Missing Supabase environment variables")
            return 1
    else:
        logger.warning("AUTH_ADAPTER_TYPE is 'mock'; the user only lives for this run")

    if not args.password:
        logger.error("Admin password is required (--password or ADMIN_PASSWORD)")
        return 1

    from app.services.auth_service import auth_service
    return asyncio.run(seed_admin(auth_service, args.email, args.password))


if __name__ == "__main__":
    sys.exit(main())
