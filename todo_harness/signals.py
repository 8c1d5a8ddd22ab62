"""
Waits for the htmx lifecycle events the todo app dispatches on ``document``.

Every htmx action goes through two observable phases:

- ``htmx:afterRequest``: the network round-trip finished.
- ``htmx:afterSettle``: the response has been swapped into the DOM and
  settled.

Assertions about the final DOM structure must wait for the settle phase.
Waiting only for the request phase is enough when the test cares about
timing or about a request having happened at all.

The sync Playwright API cannot hold a pending JS promise while Python runs
the triggering action, so the listener records the event on ``window``
under a unique token and ``page.wait_for_function`` polls for it.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable

from playwright.sync_api import Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from config import get_config

logger = logging.getLogger(__name__)

REQUEST_COMPLETED = "htmx:afterRequest"
VIEW_SETTLED = "htmx:afterSettle"

_SIGNAL_STORE = "__todoHarnessSignals"

_ARM_LISTENER_JS = f"""
([eventName, token]) => {{
    const store = (window.{_SIGNAL_STORE} = window.{_SIGNAL_STORE} || {{}});
    store[token] = false;
    document.addEventListener(eventName, () => {{ store[token] = true; }}, {{ once: true }});
}}
"""

# Consumes the flag so each armed listener is awaited exactly once.
_SIGNAL_FIRED_JS = f"""
(token) => {{
    const store = window.{_SIGNAL_STORE};
    if (store && store[token]) {{
        delete store[token];
        return true;
    }}
    return false;
}}
"""


class SignalTimeoutError(AssertionError):
    """An awaited htmx event never fired within the timeout."""

    def __init__(self, event_name: str, timeout_ms: float | None):
        self.event_name = event_name
        self.timeout_ms = timeout_ms
        limit = "the default timeout" if timeout_ms is None else f"{timeout_ms:g} ms"
        super().__init__(f"Event '{event_name}' was not dispatched on document within {limit}")


def wait_for_event(
    page: Page,
    event_name: str,
    action: Callable[[], object] | None = None,
    timeout_ms: float | None = None,
) -> None:
    """
    Block until ``event_name`` fires once on the page's document.

    The listener is attached before ``action`` runs, so an event dispatched
    synchronously by the action is not missed.

    Args:
        page: Playwright page to observe.
        event_name: DOM event name, e.g. :data:`VIEW_SETTLED`.
        action: Optional callable that triggers the event.
        timeout_ms: Maximum wait in milliseconds. Defaults to the configured
            ``SIGNAL_TIMEOUT_MS``, then to Playwright's default timeout.

    Raises:
        SignalTimeoutError: If the event is not observed in time.
    """
    if timeout_ms is None:
        timeout_ms = get_config().SIGNAL_TIMEOUT_MS

    token = uuid.uuid4().hex
    page.evaluate(_ARM_LISTENER_JS, [event_name, token])

    if action is not None:
        action()

    logger.debug("Waiting for %s (token %s)", event_name, token)
    try:
        page.wait_for_function(_SIGNAL_FIRED_JS, arg=token, timeout=timeout_ms)
    except PlaywrightTimeoutError as exc:
        raise SignalTimeoutError(event_name, timeout_ms) from exc


def wait_for_settle(
    page: Page,
    action: Callable[[], object] | None = None,
    timeout_ms: float | None = None,
) -> None:
    """Wait for the post-swap settle of an htmx update."""
    wait_for_event(page, VIEW_SETTLED, action, timeout_ms)


def wait_for_request(
    page: Page,
    action: Callable[[], object] | None = None,
    timeout_ms: float | None = None,
) -> None:
    """Wait for an htmx request to complete, regardless of the DOM swap."""
    wait_for_event(page, REQUEST_COMPLETED, action, timeout_ms)
