import logging

import pytest

from strlist import config


@pytest.fixture(autouse=True, scope='session')
def configure_logging():
    config.setup_logging(level=logging.DEBUG)
