import logging

import pytest


@pytest.fixture(autouse=True)
def close_run_log_handlers():
    """setup_logging installs plain root handlers; remove them so one test's streams don't leak into the next."""
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if type(handler) in (logging.FileHandler, logging.StreamHandler, logging.NullHandler):
            root.removeHandler(handler)
            handler.close()
