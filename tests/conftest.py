import os
import time

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _reset_log_sinks():
    """Drop sinks added during a test (the CLI binds one to the runner's stderr)."""
    yield
    logger.remove()


@pytest.fixture
def local_timezone():
    """Switch the process-local time zone to a POSIX TZ string, e.g. ``"COT+5"``."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")

    previous = os.environ.get("TZ")

    def _set(zone: str) -> None:
        os.environ["TZ"] = zone
        time.tzset()

    yield _set

    if previous is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = previous
    time.tzset()
