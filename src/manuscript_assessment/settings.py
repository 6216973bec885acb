from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass(slots=True)
class AssessmentSettings:
    """Runtime configuration for the assessment engine and its collaborators."""

    log_level: str = "INFO"
    fetch_timeout_seconds: float = 30.0


@dataclass(slots=True)
class TracingSettings:
    """OpenTelemetry export configuration."""

    endpoint: str | None = None
    service_name: str = "manuscript-assessment"


def load_settings() -> tuple[AssessmentSettings, TracingSettings]:
    """Load environment-backed settings and return typed config objects.

    Returns:
        Tuple containing engine settings and tracing settings.
    """
    load_dotenv()
    return (
        AssessmentSettings(
            log_level=os.getenv("MANUSCRIPT_LOG_LEVEL", "INFO").upper(),
            fetch_timeout_seconds=float(os.getenv("MANUSCRIPT_FETCH_TIMEOUT", "30")),
        ),
        TracingSettings(
            endpoint=os.getenv("MANUSCRIPT_OTLP_ENDPOINT") or None,
            service_name=os.getenv("MANUSCRIPT_SERVICE_NAME", "manuscript-assessment"),
        ),
    )


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once; an already-configured root logger is left alone."""
    resolved = getattr(logging, level.upper(), logging.INFO)
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(
            level=resolved,
            format="%(asctime)s %(levelname)s %(name)s %(message)s",
        )
    logging.getLogger("manuscript_assessment").setLevel(resolved)
