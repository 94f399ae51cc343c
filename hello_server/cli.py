import logging
import sys

from .config import settings
from .server import BindError, configure_logging, start

logger = logging.getLogger(__name__)


def run() -> None:
    configure_logging()
    try:
        start(settings.port)
    except BindError as exc:
        logger.error("%s", exc)
        sys.exit(1)
