"""
Timing helpers for the transient alert scenarios.

The alert auto-dismiss delay is a product decision, so its expected value
and allowed jitter live in ``tests/e2e/thresholds.yml`` rather than in the
test body.
"""

from __future__ import annotations

import time
from pathlib import Path

import yaml


class Stopwatch:
    """Monotonic stopwatch reporting elapsed milliseconds."""

    def __init__(self) -> None:
        self._started: float | None = None
        self._stopped: float | None = None

    def start(self) -> "Stopwatch":
        self._started = time.monotonic()
        self._stopped = None
        return self

    def stop(self) -> float:
        if self._started is None:
            raise RuntimeError("Stopwatch was never started")
        self._stopped = time.monotonic()
        return self.elapsed_ms

    @property
    def elapsed_ms(self) -> float:
        if self._started is None:
            raise RuntimeError("Stopwatch was never started")
        end = self._stopped if self._stopped is not None else time.monotonic()
        return (end - self._started) * 1000

    def __enter__(self) -> "Stopwatch":
        return self.start()

    def __exit__(self, *exc_info) -> None:
        self.stop()


def load_alert_thresholds(path: Path) -> dict[str, float]:
    """
    Read alert timing limits from a YAML file.

    Args:
        path: Path to a YAML file containing ``alert_dismiss_ms`` and
            ``tolerance_ms`` keys.

    Returns:
        A dictionary with the two threshold values as floats.

    Raises:
        ValueError: If either key is missing or non-numeric.
    """
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}

    try:
        alert_dismiss_ms = float(data["alert_dismiss_ms"])
        tolerance_ms = float(data["tolerance_ms"])
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(
            "Thresholds file must define numeric alert_dismiss_ms and tolerance_ms"
        ) from exc

    return {
        "alert_dismiss_ms": alert_dismiss_ms,
        "tolerance_ms": tolerance_ms,
    }


def assert_within_tolerance(
    elapsed_ms: float,
    expected_ms: float,
    tolerance_ms: float,
    label: str = "elapsed time",
) -> None:
    """Fail when ``elapsed_ms`` deviates from ``expected_ms`` by more than ``tolerance_ms``."""
    deviation = abs(elapsed_ms - expected_ms)
    assert deviation <= tolerance_ms, (
        f"{label}: expected {expected_ms:.0f} ms ± {tolerance_ms:.0f} ms, "
        f"measured {elapsed_ms:.0f} ms (off by {deviation:.0f} ms)"
    )
