import argparse

from manuscript_assessment import assess_plagiarism, assess_quality
from manuscript_assessment.io_utils import load_text, save_assessment
from manuscript_assessment.pipeline import assess_source
from manuscript_assessment.settings import configure_logging, load_settings
from manuscript_assessment.tracing import (
    configure_tracing,
    get_tracer,
    traced_plagiarism_check,
    traced_quality_assessment,
)


def main() -> None:
    """Assess one manuscript and write both reports to a JSON file."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("manuscript", help="Plain-text manuscript file, PDF file or PDF URL")
    parser.add_argument("abstract", help="Plain-text abstract file")
    parser.add_argument("--output", default="artifacts/assessment.json")
    parser.add_argument("--trace", action="store_true", help="Export spans for both assessments")
    args = parser.parse_args()

    settings, tracing_settings = load_settings()
    configure_logging(settings.log_level)

    check = assess_plagiarism
    assess = assess_quality
    if args.trace:
        configure_tracing(endpoint=tracing_settings.endpoint, service_name=tracing_settings.service_name)
        tracer = get_tracer("manuscript-assessment")
        check = traced_plagiarism_check(assess_plagiarism, tracer)
        assess = traced_quality_assessment(assess_quality, tracer)

    similarity, quality = assess_source(
        args.manuscript,
        load_text(args.abstract),
        timeout=settings.fetch_timeout_seconds,
        check=check,
        assess=assess,
    )
    save_assessment(similarity, quality, args.output)

    summary = f"similarity={similarity.similarity_score:.1f} ({similarity.status})"
    if quality is None:
        summary += f" quality=skipped: {similarity.error_message}"
    else:
        summary += f" quality={quality.overall_score}"
    print(f"{summary} -> {args.output}")


if __name__ == "__main__":
    main()
