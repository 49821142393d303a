"""
Prometheus subscriber

Exports event counts in Prometheus format using the prometheus_client
library.
"""

from __future__ import annotations

from minliblog.core.log_event import LogEvent

# Optional dependency
try:
    from prometheus_client import Counter, REGISTRY
    HAS_PROMETHEUS = True
except ImportError:
    HAS_PROMETHEUS = False
    Counter = None
    REGISTRY = None


class PrometheusSubscriber:
    """
    Count dispatched events in Prometheus counters.

    Requires prometheus_client package:
        pip install prometheus-client

    Example:
        import minliblog
        from minliblog.monitoring import PrometheusSubscriber

        minliblog.subscribe(PrometheusSubscriber(prefix="myapp_log"))

        # Metrics available:
        # myapp_log_events_total{level="INFO"}
        # myapp_log_exceptions_total{level="ERROR"}
        # myapp_log_sink_errors_total
    """

    def __init__(
        self,
        prefix: str = "minliblog",
        registry=None
    ):
        """
        Initialize Prometheus subscriber.

        Args:
            prefix: Metric name prefix
            registry: Optional custom registry (uses default if None)

        Raises:
            ImportError: If prometheus_client is not installed
        """
        if not HAS_PROMETHEUS:
            raise ImportError(
                "prometheus_client not installed. "
                "Install with: pip install prometheus-client"
            )

        self._prefix = prefix
        self._registry = registry or REGISTRY

        self._events_total = Counter(
            f"{prefix}_events_total",
            "Total dispatched log events",
            ["level"],
            registry=self._registry
        )

        self._exceptions_total = Counter(
            f"{prefix}_exceptions_total",
            "Dispatched log events carrying an exception",
            ["level"],
            registry=self._registry
        )

        self._sink_errors_total = Counter(
            f"{prefix}_sink_errors_total",
            "Total isolated sink and subscriber failures",
            registry=self._registry
        )

    def __call__(self, event: LogEvent) -> None:
        level = event.level.name
        self._events_total.labels(level=level).inc()
        if event.exception is not None:
            self._exceptions_total.labels(level=level).inc()

    def error_handler(self, source: str, error: BaseException) -> None:
        """Count a sink or subscriber failure (ContextConfig.error_handler)."""
        self._sink_errors_total.inc()
