import functools
import logging

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter, SpanExporter


def setup_telemetry(service_name: str = "newrelic-scim", exporter: SpanExporter = None):
    """Install an SDK tracer provider; spans go to the console unless ``exporter`` is given."""
    resource = Resource(attributes={
        "service.name": service_name
    })

    provider = TracerProvider(resource=resource)
    processor = BatchSpanProcessor(exporter or ConsoleSpanExporter())
    provider.add_span_processor(processor)

    trace.set_tracer_provider(provider)

    return trace.get_tracer("newrelic_scim")


def setup_logging(log_level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    return logging.getLogger("newrelic_scim")


_tracer = trace.get_tracer("newrelic_scim")


def traced(method: str, resource: str):
    """Run the wrapped client operation inside a ``scim.<name>`` span."""

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with _tracer.start_as_current_span(f"scim.{func.__name__}") as span:
                span.set_attribute("http.method", method)
                span.set_attribute("scim.resource", resource)
                return func(*args, **kwargs)

        return wrapper

    return decorator
