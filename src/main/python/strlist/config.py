import logging

APP_NAME = "strlist"
APP_VERSION = "0.0.1"

DEFAULT_SEPARATOR = ","

NOT_FOUND = -1  # result of a search that matched no token

LOG_FORMAT = "[%(levelname)s] %(asctime)s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: int = logging.INFO):
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
