from .config import ConfigurationError, get_settings
from .main import create_app
import logging
import sys
import uvicorn

logger = logging.getLogger(__name__)


def run():
    """Serve the API on the configured host and port."""
    try:
        settings = get_settings()
    except ConfigurationError as e:
        logging.basicConfig(level=logging.ERROR)
        logger.error(str(e))
        sys.exit(1)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    logger.info(f"Server running on port {settings.port}")
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)
