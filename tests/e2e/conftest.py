"""Playwright fixtures for the todo app E2E tests."""

from __future__ import annotations

import logging
import re
from collections.abc import Generator

import pytest
from playwright.sync_api import Browser, BrowserContext, Page

from config import Config
from tests.e2e.pages.todo_page import TodoPage
from todo_harness.fixture_db import reset_database, reset_database_or_exit
from todo_harness.live_app import live_app_url
from todo_harness.timing import load_alert_thresholds

logger = logging.getLogger(__name__)


@pytest.fixture(scope="session")
def live_server(harness_config: type[Config]) -> Generator[str, None, None]:
    """
    Return the base URL of the running todo app.

    The app is never started here. If it does not answer within
    APP_STARTUP_TIMEOUT seconds the E2E tests are skipped.
    """
    yield from live_app_url(
        base_url=harness_config.BASE_URL,
        startup_timeout=harness_config.APP_STARTUP_TIMEOUT,
    )


@pytest.fixture(scope="session", autouse=True)
def reset_database_after_suite(
    live_server: str, harness_config: type[Config]
) -> Generator[None, None, None]:
    """Leave the fixture database empty once the whole suite has run."""
    yield
    if harness_config.RESET_AFTER_SUITE:
        reset_database(harness_config.RESET_DB_COMMAND, cwd=harness_config.RESET_DB_CWD)


@pytest.fixture(autouse=True)
def fresh_database(live_server: str, harness_config: type[Config]) -> None:
    """Reset the fixture database before every test, before any navigation."""
    reset_database_or_exit(harness_config.RESET_DB_COMMAND, cwd=harness_config.RESET_DB_CWD)


@pytest.fixture(scope="session")
def alert_thresholds(harness_config: type[Config]) -> dict[str, float]:
    return load_alert_thresholds(harness_config.ALERT_THRESHOLDS_FILE)


@pytest.fixture(scope="session")
def browser_context_args():
    return {
        "viewport": {"width": 1280, "height": 720},
        "ignore_https_errors": True,
    }


@pytest.fixture(scope="function")
def context(
    browser: Browser, browser_context_args: dict
) -> Generator[BrowserContext, None, None]:
    context = browser.new_context(**browser_context_args)
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context: BrowserContext) -> Generator[Page, None, None]:
    page = context.new_page()
    yield page
    page.close()


@pytest.fixture
def todo_page(page: Page, live_server: str, fresh_database) -> TodoPage:
    """Todo page opened on the app root against a freshly reset database."""
    return TodoPage(page, live_server).navigate()


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Capture a screenshot and the rendered todo list when a browser test fails."""
    outcome = yield
    report = outcome.get_result()

    if report.when != "call" or not report.failed:
        return

    todo_page = item.funcargs.get("todo_page")
    if todo_page is None and item.funcargs.get("page") is not None:
        todo_page = TodoPage(item.funcargs["page"], "")
    if todo_page is None:
        return

    test_name = re.sub(r"[^\w.-]", "_", item.name)
    try:
        path = todo_page.take_screenshot(test_name)
        logger.info("Screenshot saved: %s", path)
        report.sections.append(("todo list at failure", repr(todo_page.get_todo_labels())))
    except Exception as exc:  # pragma: no cover - best effort logging
        logger.warning("Failed to capture failure artifacts: %s", exc)
