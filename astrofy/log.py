import sys

from loguru import logger

LOGGER_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def configure_logging(debug: bool = False) -> None:
    logger.remove()
    logger.add(sys.stdout, format=LOGGER_FORMAT, level="DEBUG" if debug else "INFO")
