"""
Exceptions raised inside the assessment engine.

None of these reach callers of the two assessors: the plagiarism check turns
them into a FAILED report and the quality assessment has no failure path.
"""


class AssessmentError(Exception):
    """Base exception for assessment engine errors."""

    pass


class ExtractionError(AssessmentError):
    """Raised when manuscript text cannot be extracted from its source."""

    pass


class ComputationError(AssessmentError):
    """Raised on internal numeric faults such as misaligned vectors."""

    pass
