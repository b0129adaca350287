"""
Prometheus Metrics Registration.

Tool dispatch and SSE session metrics, exposed on GET /metrics.
"""

from prometheus_client import Counter, Gauge, Histogram

# ============================================================================
# COUNTERS
# ============================================================================

tool_calls_total = Counter(
    "tool_calls_total",
    "Total tool calls",
    ["tool_name", "status"],  # success, failure, unknown_tool, invalid_arguments
)

# ============================================================================
# HISTOGRAMS
# ============================================================================

tool_call_duration = Histogram(
    "tool_call_duration_seconds",
    "Upstream Notion call duration per tool",
    ["tool_name"],
    buckets=(0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0),
)

# ============================================================================
# GAUGES
# ============================================================================

sse_sessions_active = Gauge("sse_sessions_active", "Open SSE sessions")
