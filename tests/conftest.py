import logging

import pytest

from gridmath.config import GridmathConfig, set_config
from gridmath.precision import set_default_context


@pytest.fixture(autouse=True)
def fresh_state():
    """Every test starts from the default configuration and context."""
    set_config(GridmathConfig())
    set_default_context(None)
    logger = logging.getLogger("gridmath")
    level = logger.level
    handlers = list(logger.handlers)
    yield
    set_config(GridmathConfig())
    set_default_context(None)
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
