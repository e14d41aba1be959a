"""Latency instrumentation for aggregation steps."""

from __future__ import annotations

import contextlib
import time
from collections.abc import Generator
from typing import Any

from flora_services.observability.logging import get_logger

logger = get_logger(__name__)


@contextlib.contextmanager
def timed(component: str, **fields: Any) -> Generator[None, None, None]:
    """Log a ``component_latency`` entry once the block finishes.

    Extra keyword fields (e.g. ``records=len(sales)``) go into the entry as-is,
    so callers must not pass free text coming from clients.
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        logger.info(
            "component_latency",
            extra={
                **fields,
                "component": component,
                "elapsed_ms": round((time.perf_counter() - start) * 1000, 2),
            },
        )
