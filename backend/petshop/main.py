import logging

from dotenv import load_dotenv

# Load .env before the config module reads TZ at import time
load_dotenv()

from petshop.core import config  # noqa: E402
from petshop.core.logging_config import setup_logging  # noqa: E402
from petshop.shop import PetShop  # noqa: E402

logger = logging.getLogger(__name__)


def create_shop(configure_logging: bool = True) -> PetShop:
    """Build a ready-to-use PetShop for the presentation layer.

    Reads logging settings from the environment (LOG_LEVEL, LOG_JSON,
    LOG_TO_FILE, LOG_DIR) unless the embedding process configures logging
    itself.
    """
    if configure_logging:
        setup_logging(
            log_level=config.get_log_level(),
            log_to_file=config.get_log_to_file(),
            use_json_format=config.get_log_json_format(),
            log_dir=config.get_log_dir(),
        )
        config.log_timezone_config()

    shop = PetShop()
    logger.info(
        "Pet shop ready",
        extra={"context": {"services": len(shop.list_services())}},
    )
    return shop
