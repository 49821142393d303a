"""
Monitoring module for dispatched log events

Collectors are broadcast subscribers: they see every event regardless of
which provider is installed.

Example:
    import minliblog
    from minliblog.monitoring import MetricsCollector

    collector = MetricsCollector()
    minliblog.subscribe(collector)

    metrics = collector.get_metrics()
    print(f"Events: {metrics.total_events}")
"""

from minliblog.monitoring.metrics import EventMetrics, MetricsCollector

# Optional monitors (may raise ImportError if dependencies not installed)
try:
    from minliblog.monitoring.prometheus_monitor import (
        PrometheusSubscriber,
        HAS_PROMETHEUS,
    )
except ImportError:
    PrometheusSubscriber = None
    HAS_PROMETHEUS = False

__all__ = [
    "EventMetrics",
    "MetricsCollector",
    "PrometheusSubscriber",
    "HAS_PROMETHEUS",
]
