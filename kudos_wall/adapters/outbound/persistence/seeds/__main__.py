# kudos_wall/adapters/outbound/persistence/seeds/__main__.py

import asyncio
import logging

from kudos_wall.adapters.configuration.config import Settings
from kudos_wall.adapters.outbound.persistence.seeds import run_all_seeds

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    asyncio.run(run_all_seeds(Settings()))
