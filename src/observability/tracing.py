import os
from functools import wraps
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased


def init_tracing(service_name: str = "posts", sample_ratio: float = 0.1, export: bool = True) -> TracerProvider:
    resource = Resource.create(
        {
            "service.name": service_name,
            "service.version": os.getenv("SERVICE_VERSION", "1.0.0"),
            "deployment.environment": os.getenv("ENV", "development"),
        }
    )
    provider = TracerProvider(
        sampler=TraceIdRatioBased(float(os.getenv("OTEL_SAMPLE_RATIO", sample_ratio))),
        resource=resource,
    )
    trace.set_tracer_provider(provider)

    if export:
        span_processor = BatchSpanProcessor(ConsoleSpanExporter(), max_queue_size=1000)
        provider.add_span_processor(span_processor)
    return provider


def trace_function(name: str):
    def decorator(func):
        tracer = trace.get_tracer(__name__)

        @wraps(func)
        def wrapper(*args, **kwargs):
            with tracer.start_as_current_span(name):
                return func(*args, **kwargs)

        return wrapper

    return decorator
