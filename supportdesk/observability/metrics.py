"""Prometheus metrics for supportdesk.

Provides counters for pipeline outcomes, per-step latencies and the live
conversation count. Exposing them over HTTP is left to the host process.
"""

from prometheus_client import Counter, Gauge, Histogram

QUERIES_PROCESSED = Counter(
    "supportdesk_queries_processed_total",
    "Total number of queries processed by the agent",
    labelnames=["intent", "strategy"],
)

ESCALATIONS = Counter(
    "supportdesk_escalations_total",
    "Total number of responses flagged for human hand-off",
    labelnames=["intent"],
)

FAIRNESS_VIOLATIONS = Counter(
    "supportdesk_fairness_violations_total",
    "Total number of queries rejected by the fairness precondition",
)

ETHICS_ISSUES = Counter(
    "supportdesk_ethics_issues_total",
    "Total number of advisory ethics findings",
    labelnames=["check"],
)

ACTIVE_CONVERSATIONS = Gauge(
    "supportdesk_active_conversations",
    "Number of live conversation contexts in the session store",
)

PIPELINE_STEP_LATENCY = Histogram(
    "supportdesk_pipeline_step_latency_seconds",
    "Latency of individual pipeline steps",
    labelnames=["step"],
    buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25),
)

PENDING_TASKS = Gauge(
    "supportdesk_pending_tasks",
    "Number of tasks waiting in planning task queues",
)
