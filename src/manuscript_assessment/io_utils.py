from __future__ import annotations

from dataclasses import asdict
import json
from pathlib import Path

from .schema import QualityReport, SimilarityReport


def load_text(path: str | Path) -> str:
    return Path(path).read_text(encoding="utf-8")


def report_to_dict(report: SimilarityReport | QualityReport) -> dict:
    return asdict(report)


def save_report(report: SimilarityReport | QualityReport, path: str | Path) -> None:
    destination = Path(path)
    destination.parent.mkdir(parents=True, exist_ok=True)

    with destination.open("w", encoding="utf-8") as file_handle:
        json.dump(report_to_dict(report), file_handle, indent=2)
        file_handle.write("\n")


def save_assessment(
    similarity: SimilarityReport,
    quality: QualityReport | None,
    path: str | Path,
) -> None:
    """Write both reports for one manuscript into a single JSON document.

    `quality` is written as null when the manuscript text could not be extracted.
    """
    destination = Path(path)
    destination.parent.mkdir(parents=True, exist_ok=True)

    payload = {
        "similarity": report_to_dict(similarity),
        "quality": report_to_dict(quality) if quality is not None else None,
    }
    with destination.open("w", encoding="utf-8") as file_handle:
        json.dump(payload, file_handle, indent=2)
        file_handle.write("\n")
