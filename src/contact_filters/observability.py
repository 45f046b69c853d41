"""Observability: structured logs (operation, latency_ms), in-process counters."""

from __future__ import annotations

import logging
from typing import Any

_LOGGER = logging.getLogger("contact_filters")

# Counter stub: calls[operation] = count, errors[operation] = count
METRICS: dict[str, dict[str, int]] = {"calls": {}, "errors": {}}

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    if name:
        return _LOGGER.getChild(name)
    return _LOGGER


def configure_logging(level: str = "INFO") -> None:
    """Attach a stderr handler to the package logger once."""
    _LOGGER.setLevel(level)
    if not _LOGGER.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        _LOGGER.addHandler(handler)


def log_filter_invocation(
    operation: str,
    latency_ms: float,
    error: str | None = None,
    extra: dict[str, Any] | None = None,
) -> None:
    """Emit structured log and update counters."""
    payload: dict[str, Any] = {
        "operation": operation,
        "latency_ms": round(latency_ms, 2),
    }
    if error:
        payload["error"] = error
    if extra:
        payload.update(extra)
    _LOGGER.info("filter_invocation", extra=payload)
    METRICS["calls"][operation] = METRICS["calls"].get(operation, 0) + 1
    if error:
        METRICS["errors"][operation] = METRICS["errors"].get(operation, 0) + 1


def metrics_snapshot() -> dict[str, dict[str, int]]:
    return {k: dict(v) for k, v in METRICS.items()}
