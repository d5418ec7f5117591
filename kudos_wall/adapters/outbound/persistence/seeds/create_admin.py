# kudos_wall/adapters/outbound/persistence/seeds/create_admin.py

"""
Seed for the initial administrator account.

Reads ADMIN_EMAIL, ADMIN_PASSWORD and ADMIN_NAME from the environment and
creates an ADMIN user unless one already exists.
"""

import logging
import os
from typing import Mapping, Optional

from kudos_wall.adapters.outbound.security.password_hasher import PasswordHasher
from kudos_wall.application.ports.outbound import IUserRepository
from kudos_wall.domain.models.user_domain_model import User, UserRole

logger = logging.getLogger(__name__)

REQUIRED_VARIABLES = ("ADMIN_EMAIL", "ADMIN_PASSWORD", "ADMIN_NAME")


async def run_create_admin_seed(
        user_repository: IUserRepository,
        password_hasher: PasswordHasher,
        environ: Optional[Mapping[str, str]] = None,
) -> Optional[User]:
    """
    Create the first ADMIN user.

    Returns:
        The created user, or None when an ADMIN already exists

    Raises:
        ValueError: If a required environment variable is missing
    """
    environ = os.environ if environ is None else environ
    missing = [name for name in REQUIRED_VARIABLES if not environ.get(name)]
    if missing:
        raise ValueError(f"Missing environment variables: {', '.join(missing)}")

    admins = await user_repository.list_by_role(UserRole.ADMIN)
    if admins:
        logger.info(f"Admin user already exists ({admins[0].email}). No action taken.")
        return None

    admin = await user_repository.create({
        "email": environ["ADMIN_EMAIL"],
        "name": environ["ADMIN_NAME"],
        "password": await password_hasher.hash(environ["ADMIN_PASSWORD"]),
        "role": UserRole.ADMIN,
    })
    logger.info(f"Admin user created with ID: {admin.id}")
    return admin
