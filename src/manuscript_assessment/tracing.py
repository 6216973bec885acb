"""OpenTelemetry tracing helpers for the manuscript assessors.

Each assessor call can be wrapped so it is recorded as one span carrying the
key figures of the resulting report.

Usage with an OTLP backend:

    from manuscript_assessment.tracing import configure_tracing, get_tracer
    from manuscript_assessment.tracing import traced_plagiarism_check

    configure_tracing(
        endpoint="http://localhost:6006/v1/traces",
        service_name="manuscript-assessment",
    )
    check = traced_plagiarism_check(assess_plagiarism, get_tracer("plagiarism"))
    report = check(manuscript_text)

Usage without a backend (development / testing):

    configure_tracing()   # uses ConsoleSpanExporter by default
"""
from __future__ import annotations

from typing import Callable

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource, SERVICE_NAME
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    ConsoleSpanExporter,
    SimpleSpanProcessor,
    SpanExporter,
)

from .schema import STATUS_FAILED, QualityReport, SimilarityReport

# ---------------------------------------------------------------------------
# Span attribute names
# ---------------------------------------------------------------------------

ATTR_INPUT_VALUE = "input.value"
ATTR_INPUT_LENGTH = "input.length"
ATTR_SIMILARITY_SCORE = "assessment.similarity_score"
ATTR_STATUS = "assessment.status"
ATTR_MATCHED_SOURCES = "assessment.matched_sources"
ATTR_OVERALL_SCORE = "assessment.overall_score"
ATTR_ISSUE_COUNT = "assessment.issue_count"
ATTR_RECOMMENDATION_COUNT = "assessment.recommendation_count"

INPUT_PREVIEW_CHARS = 500

# ---------------------------------------------------------------------------
# Provider lifecycle helpers
# ---------------------------------------------------------------------------

_provider: TracerProvider | None = None


def _otlp_exporter(endpoint: str) -> SpanExporter:
    try:
        from opentelemetry.exporter.otlp.proto.http.trace_exporter import (
            OTLPSpanExporter,
        )
    except ImportError as exc:  # pragma: no cover
        raise ImportError(
            "MANUSCRIPT_OTLP_ENDPOINT is set but opentelemetry-exporter-otlp-proto-http "
            "is not installed. Install it with:\n"
            "  pip install 'manuscript-assessment[otlp]'"
        ) from exc
    return OTLPSpanExporter(endpoint=endpoint)


def configure_tracing(
    endpoint: str | None = None,
    service_name: str = "manuscript-assessment",
    exporter: SpanExporter | None = None,
) -> TracerProvider:
    """Install the provider that receives assessment spans.

    ``scripts/assess_manuscript.py --trace`` calls this with the values of
    ``MANUSCRIPT_OTLP_ENDPOINT`` and ``MANUSCRIPT_SERVICE_NAME``. Spans go to
    the explicit *exporter* if one is given, else to the OTLP endpoint, else
    to stdout.

    Returns:
        The new provider. It replaces any provider from an earlier call.
    """
    global _provider

    if exporter is None:
        exporter = _otlp_exporter(endpoint) if endpoint is not None else ConsoleSpanExporter()

    provider = TracerProvider(resource=Resource(attributes={SERVICE_NAME: service_name}))
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    trace.set_tracer_provider(provider)
    _provider = provider
    return provider


def get_tracer(name: str) -> trace.Tracer:
    """Tracer for the assessor wrappers below, from the global provider until configure_tracing runs."""
    if _provider is not None:
        return _provider.get_tracer(name)
    return trace.get_tracer(name)


# ---------------------------------------------------------------------------
# Span-wrapping helpers for the assessors
# ---------------------------------------------------------------------------


def traced_plagiarism_check(
    check_fn: Callable[..., SimilarityReport],
    tracer: trace.Tracer,
) -> Callable[..., SimilarityReport]:
    """Wrap a plagiarism check so every call is recorded as a span.

    The span is named ``"plagiarism-check"`` and records the input preview
    and length, the similarity score, the report status and the number of
    matched sources. A FAILED report sets the span status to ERROR with the
    report's error message.

    Args:
        check_fn: Callable with signature ``(text, **kwargs) -> SimilarityReport``.
        tracer: OTel tracer to use for span creation.

    Returns:
        A wrapped callable with identical behaviour plus tracing.
    """

    def _wrapped(text: str | None = None, **kwargs) -> SimilarityReport:
        with tracer.start_as_current_span("plagiarism-check") as span:
            span.set_attribute(ATTR_INPUT_VALUE, (text or "")[:INPUT_PREVIEW_CHARS])
            span.set_attribute(ATTR_INPUT_LENGTH, len(text or ""))
            try:
                report = check_fn(text, **kwargs)
            except Exception as exc:
                span.set_status(trace.StatusCode.ERROR, str(exc))
                span.record_exception(exc)
                raise
            span.set_attribute(ATTR_SIMILARITY_SCORE, report.similarity_score)
            span.set_attribute(ATTR_STATUS, report.status)
            span.set_attribute(ATTR_MATCHED_SOURCES, len(report.matched_sources))
            if report.status == STATUS_FAILED:
                span.set_status(trace.StatusCode.ERROR, report.error_message or "")
            else:
                span.set_status(trace.StatusCode.OK)
            return report

    return _wrapped


def traced_quality_assessment(
    assess_fn: Callable[..., QualityReport],
    tracer: trace.Tracer,
) -> Callable[..., QualityReport]:
    """Wrap a quality assessment so every call is recorded as a span.

    The span is named ``"quality-assessment"`` and records the input length,
    the overall score and the issue and recommendation counts.

    Args:
        assess_fn: Callable with signature ``(text, abstract) -> QualityReport``.
        tracer: OTel tracer to use for span creation.

    Returns:
        A wrapped callable with identical behaviour plus tracing.
    """

    def _wrapped(text: str, abstract: str, **kwargs) -> QualityReport:
        with tracer.start_as_current_span("quality-assessment") as span:
            span.set_attribute(ATTR_INPUT_LENGTH, len(text))
            try:
                report = assess_fn(text, abstract, **kwargs)
            except Exception as exc:
                span.set_status(trace.StatusCode.ERROR, str(exc))
                span.record_exception(exc)
                raise
            span.set_attribute(ATTR_OVERALL_SCORE, report.overall_score)
            span.set_attribute(ATTR_ISSUE_COUNT, len(report.issues))
            span.set_attribute(ATTR_RECOMMENDATION_COUNT, len(report.recommendations))
            span.set_status(trace.StatusCode.OK)
            return report

    return _wrapped
