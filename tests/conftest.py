import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """main_entry installs handlers on the package logger; drop them after each test."""
    yield
    logger = logging.getLogger("shuntcalc")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
