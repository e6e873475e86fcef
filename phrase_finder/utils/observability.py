"""Structured logging, Prometheus metrics and OpenTelemetry spans.

Metric handles never raise: a failing collector must not break a search that
runs on every keystroke.
"""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from typing import Any, Dict, Iterable, Iterator, Optional

from opentelemetry import trace
from prometheus_client import REGISTRY, Counter, Histogram

_TRACER_NAME = "phrase_finder"


class StructuredLoggerAdapter(logging.LoggerAdapter):
    """Adapter that appends bound and per-call context as a JSON suffix."""

    def bind(self, **context: Any) -> "StructuredLoggerAdapter":
        merged = dict(self.extra or {})
        merged.update(context)
        return StructuredLoggerAdapter(self.logger, merged)

    def process(self, msg: str, kwargs: Dict[str, Any]):
        event_context: Dict[str, Any] = dict(self.extra or {})
        provided = kwargs.pop("context", None)
        if isinstance(provided, dict):
            event_context.update(provided)
        if event_context:
            payload = json.dumps(
                event_context, sort_keys=True, default=str, ensure_ascii=False
            )
            msg = f"{msg} | {payload}"
        return msg, kwargs


def get_logger(name: str, **context: Any) -> StructuredLoggerAdapter:
    """Return a project logger with optional bound context."""

    return StructuredLoggerAdapter(logging.getLogger(name), context)


class _MetricHandle:
    """Base wrapper providing a ``labels`` passthrough."""

    def __init__(self, impl: Any = None) -> None:
        self._impl = impl

    def labels(self, **labels: Any):
        if self._impl is None:
            return self.__class__(None)
        try:
            return self.__class__(self._impl.labels(**labels))
        except ValueError:
            return self.__class__(None)


class CounterHandle(_MetricHandle):
    def inc(self, amount: float = 1.0) -> None:
        if self._impl is None:
            return
        try:
            self._impl.inc(amount)
        except ValueError:
            return


class HistogramHandle(_MetricHandle):
    def observe(self, value: float) -> None:
        if self._impl is None:
            return
        try:
            self._impl.observe(value)
        except ValueError:
            return

    @contextmanager
    def time(self) -> Iterator[None]:
        start = time.perf_counter()
        try:
            yield
        finally:
            self.observe(time.perf_counter() - start)


def _registered_collector(name: str) -> Any:
    # prometheus_client keeps no public lookup by name.
    return REGISTRY._names_to_collectors.get(name)  # type: ignore[attr-defined]


def create_counter(
    name: str,
    documentation: str,
    label_names: Optional[Iterable[str]] = None,
) -> CounterHandle:
    """Create a counter, reusing one already registered under ``name``."""

    try:
        impl = Counter(name, documentation, labelnames=tuple(label_names or ()))
    except ValueError:
        impl = _registered_collector(name)
    return CounterHandle(impl)


def create_histogram(
    name: str,
    documentation: str,
    label_names: Optional[Iterable[str]] = None,
    buckets: Optional[Iterable[float]] = None,
) -> HistogramHandle:
    """Create a histogram, reusing one already registered under ``name``."""

    kwargs: Dict[str, Any] = {"labelnames": tuple(label_names or ())}
    if buckets is not None:
        kwargs["buckets"] = tuple(buckets)
    try:
        impl = Histogram(name, documentation, **kwargs)
    except ValueError:
        impl = _registered_collector(name)
    return HistogramHandle(impl)


@contextmanager
def start_span(name: str, attributes: Optional[Dict[str, Any]] = None):
    """Start an OpenTelemetry span as the current span."""

    tracer = trace.get_tracer(_TRACER_NAME)
    with tracer.start_as_current_span(name) as span:
        if attributes:
            add_span_attributes(span, attributes)
        yield span


def add_span_attributes(span: Any, attributes: Dict[str, Any]) -> None:
    """Attach ``attributes`` to ``span``; ``None`` spans are ignored."""

    if span is None:
        return
    for key, value in attributes.items():
        if not isinstance(key, str) or value is None:
            continue
        span.set_attribute(key, value)


def record_exception(span: Any, error: BaseException) -> None:
    """Record ``error`` on ``span`` and flag it as failed."""

    if span is None:
        return
    span.record_exception(error)
    span.set_attribute("error", True)


__all__ = [
    "StructuredLoggerAdapter",
    "get_logger",
    "CounterHandle",
    "HistogramHandle",
    "create_counter",
    "create_histogram",
    "start_span",
    "add_span_attributes",
    "record_exception",
]
