"""
Error types raised by the admission pipeline.

Every error in this module is unrecoverable: the batch run either
completes and writes all department rosters or stops at the first
failure. The errors propagate unchanged to ``main.main`` which reports
them and sets the exit status.
"""

from __future__ import annotations


class AdmissionError(Exception):
    """Base class for failures that abort the admission run."""


class InvalidCapacityError(AdmissionError):
    """The department capacity read at startup is not a valid integer."""


class ApplicantFileError(AdmissionError):
    """The applicant source file could not be opened or read."""


class MalformedRecordError(AdmissionError):
    """An applicant record has the wrong shape or a non-numeric grade."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class OutputWriteError(AdmissionError):
    """A department roster file could not be written."""
