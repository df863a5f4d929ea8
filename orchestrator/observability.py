#Span tracing and in-process counters shared by the suggestion flow and the HTTP layer

import sys
import time
import uuid
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict, Any, Optional

from loguru import logger


@dataclass
class TraceSpan:
    """Represents a trace span."""
    span_id: str
    operation: str
    start_time: float
    end_time: Optional[float] = None
    metadata: Optional[Dict[str, Any]] = None

    @property
    def duration(self) -> Optional[float]:
        if self.end_time is None:
            return None
        return self.end_time - self.start_time


class ObservabilityManager:
    """Keeps open spans and a flat map of metric values."""

    def __init__(self):
        self.active_spans: Dict[str, TraceSpan] = {}
        self.metrics: Dict[str, float] = {}

    def start_span(self, request_id: Optional[str], operation: str, metadata: Optional[Dict[str, Any]] = None) -> TraceSpan:
        """Start a new trace span."""
        request_id = request_id or uuid.uuid4().hex[:12]
        span = TraceSpan(
            span_id=f"{request_id}_{operation}",
            operation=operation,
            start_time=time.perf_counter(),
            metadata=metadata or {}
        )
        self.active_spans[span.span_id] = span
        logger.debug(f"Started span: {span.span_id}")
        return span

    def end_span(self, span_id: str) -> Optional[TraceSpan]:
        """End a trace span."""
        span = self.active_spans.pop(span_id, None)
        if span is None:
            return None
        span.end_time = time.perf_counter()
        logger.debug(f"Ended span: {span_id}, duration: {span.duration:.3f}s")
        return span

    def log_metric(self, name: str, value: float) -> None:
        """Log a metric value."""
        self.metrics[name] = value
        logger.debug(f"Metric: {name} = {value}")

    def log_metrics(self, metrics: Dict[str, float]) -> None:
        """Log multiple metrics."""
        for name, value in metrics.items():
            self.log_metric(name, value)

    def increment(self, name: str, amount: float = 1) -> float:
        """Add to a counter and return its new value."""
        value = self.metrics.get(name, 0) + amount
        self.metrics[name] = value
        return value

    def get_metrics(self) -> Dict[str, float]:
        """Get all metrics."""
        return self.metrics.copy()

    def clear_metrics(self) -> None:
        """Clear all metrics."""
        self.metrics.clear()


# Global observability manager
observability = ObservabilityManager()


@contextmanager
def trace_request(request_id: Optional[str], operation: str, metadata: Optional[Dict[str, Any]] = None):
    """Context manager for tracing operations."""
    span = observability.start_span(request_id, operation, metadata)
    try:
        yield span
    finally:
        observability.end_span(span.span_id)


def log_metrics(metrics: Dict[str, float]) -> None:
    """Log metrics using the global observability manager."""
    observability.log_metrics(metrics)


def log_metric(name: str, value: float) -> None:
    """Log a single metric."""
    observability.log_metric(name, value)


def increment(name: str, amount: float = 1) -> float:
    return observability.increment(name, amount)


def configure_logging(level: str = "INFO") -> None:
    """Replace loguru's default sink with one at the requested level."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper())
