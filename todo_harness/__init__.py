"""
Support package for the todo app end-to-end suite.

Holds everything the browser tests need that is not a page object:
fixture database reset, app reachability checks, htmx signal waits
and alert timing helpers.
"""

import logging

from todo_harness.fixture_db import (
    RESET_FAILURE_EXIT_CODE,
    FixtureResetError,
    reset_database,
    reset_database_or_exit,
)
from todo_harness.signals import (
    REQUEST_COMPLETED,
    VIEW_SETTLED,
    SignalTimeoutError,
    wait_for_event,
    wait_for_request,
    wait_for_settle,
)
from todo_harness.timing import Stopwatch, assert_within_tolerance, load_alert_thresholds

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

__all__ = [
    "FixtureResetError",
    "RESET_FAILURE_EXIT_CODE",
    "REQUEST_COMPLETED",
    "SignalTimeoutError",
    "Stopwatch",
    "VIEW_SETTLED",
    "assert_within_tolerance",
    "load_alert_thresholds",
    "reset_database",
    "reset_database_or_exit",
    "wait_for_event",
    "wait_for_request",
    "wait_for_settle",
]
