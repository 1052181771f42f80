"""Prometheus metrics for Slack delivery.

All metrics use the 'slack_logger_' prefix. They live in the default
registry, so any prometheus_client exporter in the host process serves them.
"""

from prometheus_client import Counter, Gauge, Histogram

POSTS = Counter(
    "slack_logger_posts_total",
    "Slack posts attempted by the delivery queue",
    ["status"],  # status: success, failure
)

QUEUE_PENDING = Gauge(
    "slack_logger_queue_pending",
    "Posts waiting in the delivery queue",
)

DISPATCH_DELAY = Histogram(
    "slack_logger_dispatch_delay_seconds",
    "Time the rate gate held a post before dispatch",
    buckets=(0.0, 0.1, 0.25, 0.5, 0.75, 1.0, 2.5, 5.0),
)
