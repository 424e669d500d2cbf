"""OpenTelemetry instruments for the fare service.

Counters are no-ops until ``init_otel_sdk`` installs a MeterProvider, so
library code and tests can record freely.
"""

import logging

from opentelemetry import metrics, trace

logger = logging.getLogger(__name__)

meter = metrics.get_meter("magical_miles")

routing_requests = meter.create_counter(
    name="routing_requests_total",
    description="Routing requests by outcome (ok, no_route, timeout, server_error, malformed)",
    unit="1",
)

fare_tiers = meter.create_counter(
    name="fare_distance_tier_total",
    description="Trips priced per distance source tier (routing, haversine, default)",
    unit="1",
)

AI_ENRICHMENT_OUTCOMES = ("used", "unavailable", "rejected")

ai_enrichment = meter.create_counter(
    name="ai_enrichment_total",
    description=f"AI enrichment attempts by outcome ({', '.join(AI_ENRICHMENT_OUTCOMES)})",
    unit="1",
)

routing_latency = meter.create_histogram(
    name="routing_latency_ms",
    description="Latency of successful routing requests",
    unit="ms",
)


def init_otel_sdk(endpoint: str, environment: str, service_version: str) -> None:
    """Initialize OpenTelemetry SDK for metrics and traces.

    Configures TracerProvider and MeterProvider with OTLP gRPC exporters.
    Must be called before creating the FastAPI app so auto-instrumentation
    picks up the providers.
    """
    from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import OTLPMetricExporter
    from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
    from opentelemetry.sdk.metrics import MeterProvider
    from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
    from opentelemetry.sdk.resources import Resource
    from opentelemetry.sdk.trace import TracerProvider
    from opentelemetry.sdk.trace.export import BatchSpanProcessor

    resource = Resource.create(
        {
            "service.name": "magical-miles-fares",
            "service.version": service_version,
            "deployment.environment": environment,
        }
    )

    trace_provider = TracerProvider(resource=resource)
    trace_provider.add_span_processor(
        BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint, insecure=True))
    )
    trace.set_tracer_provider(trace_provider)
    logger.info("OpenTelemetry tracing initialized (endpoint=%s)", endpoint)

    metric_reader = PeriodicExportingMetricReader(
        OTLPMetricExporter(endpoint=endpoint, insecure=True),
        export_interval_millis=15_000,
    )
    metrics.set_meter_provider(MeterProvider(resource=resource, metric_readers=[metric_reader]))
    logger.info("OpenTelemetry metrics initialized")
