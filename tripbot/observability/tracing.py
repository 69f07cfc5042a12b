"""Render tracing.

A trace id is bound once per request with ``bind_trace`` and picked up by
every span opened while it is bound. Finished spans are emitted as
structlog debug events rather than exported to a collector.
"""

from __future__ import annotations

import time
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

import structlog

logger = structlog.get_logger()

TRACE_ID_KEY = 'trace_id'


@dataclass
class Span:
    name: str
    trace_id: str
    start_ns: int = field(default_factory=time.perf_counter_ns)
    end_ns: int | None = None
    attributes: dict[str, Any] = field(default_factory=dict)

    def end(self) -> None:
        self.end_ns = time.perf_counter_ns()

    @property
    def duration_ms(self) -> float | None:
        if self.end_ns is None:
            return None
        return (self.end_ns - self.start_ns) / 1_000_000.0

    def as_dict(self) -> dict[str, Any]:
        return {
            'name': self.name,
            'duration_ms': self.duration_ms,
            'attributes': self.attributes,
        }


def current_trace_id() -> str | None:
    return structlog.contextvars.get_contextvars().get(TRACE_ID_KEY)


@contextmanager
def bind_trace(trace_id: str | None = None) -> Iterator[str]:
    """Bind a trace id to the current context for the duration of the block."""
    trace_id = trace_id or uuid.uuid4().hex
    with structlog.contextvars.bound_contextvars(**{TRACE_ID_KEY: trace_id}):
        yield trace_id


@contextmanager
def traced(event: str, name: str, *, trace_id: str | None = None, **attributes: Any) -> Iterator[Span]:
    """Time the block as a span and log ``event`` when it completes.

    The trace id is, in order: the one passed in, the one bound with
    ``bind_trace``, or a fresh one for a standalone span.
    """
    span = Span(
        name=name,
        trace_id=trace_id or current_trace_id() or uuid.uuid4().hex,
        attributes=dict(attributes),
    )
    yield span
    span.end()
    logger.debug(event, **{TRACE_ID_KEY: span.trace_id}, span=span.as_dict())
