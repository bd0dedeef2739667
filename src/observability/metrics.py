from prometheus_client import Counter, Histogram, Gauge, CollectorRegistry

registry = CollectorRegistry()

graphql_requests_total = Counter(
    "posts_graphql_requests_total", "GraphQL operations executed", ["operation_type"], registry=registry
)
graphql_request_duration = Histogram(
    "posts_graphql_request_duration_seconds",
    "GraphQL operation duration seconds",
    ["operation_type"],
    buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1),
    registry=registry,
)
auth_failures_total = Counter("posts_auth_failures_total", "Rejected credentials", ["reason"], registry=registry)
mutations_total = Counter("posts_mutations_total", "Applied post mutations", ["operation"], registry=registry)
store_size = Gauge("posts_store_size", "Number of posts currently stored", registry=registry)


def record_request_metrics(operation_type: str, duration: float):
    graphql_requests_total.labels(operation_type=operation_type).inc()
    graphql_request_duration.labels(operation_type=operation_type).observe(duration)
