from prometheus_client import Counter, Histogram

# === Common HTTP Metrics ===

http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["service", "endpoint", "method", "status"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["service", "endpoint", "method"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.5, 5.0, 10.0],
)

# === Conversion Metrics ===

conversion_requests_total = Counter(
    "conversion_requests_total",
    "Total wireframe conversion requests by outcome",
    ["outcome"],
)

conversion_errors_total = Counter(
    "conversion_errors_total",
    "Total wireframe conversion failures by error type",
    ["error_type"],
)

upstream_latency_seconds = Histogram(
    "upstream_latency_seconds",
    "Chat completion API latency in seconds",
    ["model"],
    buckets=[0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0, 120.0],
)
