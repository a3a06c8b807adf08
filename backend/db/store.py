import logging
import os

from dotenv import load_dotenv

from db.seed import seed_sample_data
from services.catalog_repository import CatalogRepository

load_dotenv()

logger = logging.getLogger(__name__)


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


SEED_SAMPLE_DATA = _env_flag("SEED_SAMPLE_DATA", "1")


def create_store(seed: bool | None = None) -> CatalogRepository:
    """
    Build the process-wide catalog. Called once at startup; handlers get it
    through db.deps.get_store.
    """
    if seed is None:
        seed = SEED_SAMPLE_DATA

    store = CatalogRepository()
    if seed:
        brands, devices = seed_sample_data(store)
        logger.info("Seeded catalog: brands=%s devices=%s", brands, devices)
    return store
