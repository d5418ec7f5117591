# kudos_wall/adapters/outbound/persistence/seeds/__init__.py

"""
Database seeds.

Run every seed from the command line:
`python -m kudos_wall.adapters.outbound.persistence.seeds`
"""

import logging

from kudos_wall.adapters.configuration.config import Settings
from kudos_wall.adapters.outbound.persistence.database import Database
from kudos_wall.adapters.outbound.persistence.repositories.user_repository import AsyncUserRepository
from kudos_wall.adapters.outbound.persistence.seeds.create_admin import run_create_admin_seed
from kudos_wall.adapters.outbound.security.password_hasher import PasswordHasher

logger = logging.getLogger(__name__)


async def run_all_seeds(settings: Settings) -> None:
    """
    Runs every seed in order against the configured database.
    """
    logger.info("Running seeds")
    database = Database(settings)
    try:
        async with database.session() as db:
            await run_create_admin_seed(
                AsyncUserRepository(db),
                PasswordHasher(rounds=settings.BCRYPT_ROUNDS),
            )
    finally:
        await database.dispose()
    logger.info("Seeds finished")
