"""
Parsing of the startup capacity and the applicant source file.

Each line of the applicant file describes one applicant with exactly
ten whitespace-separated fields::

    <first name> <last name> <physics> <chemistry> <math> <cs> <admission> <dept 1> <dept 2> <dept 3>

Grades must be finite real numbers. The three department names are
the applicant's preferences in priority order; they are not validated
and an unknown name never matches any department. Any malformed input
aborts the run with an ``AdmissionError``.
"""

from __future__ import annotations

import math
import re
import sys
from pathlib import Path
from typing import List, Optional, Sequence, TextIO, Union

from university_admission.errors import ApplicantFileError, InvalidCapacityError, MalformedRecordError
from university_admission.logger import logger
from university_admission.models import Applicant, Department
from university_admission.scoring import compute_department_scores

FIELD_COUNT = 10
GRADE_FIELDS = ("physics", "chemistry", "math", "computer_science", "admission")

# Plain ASCII decimal notation only; no digit separators or non-ASCII digits
INTEGER_RE = re.compile(r"[+-]?[0-9]+")
DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def read_capacity(stream: Optional[TextIO] = None) -> int:
    """
    Read the per-department capacity from a text stream.

    The first whitespace-separated token of the stream must be a
    non-negative integer.

    Parameters
    ----------
    stream : TextIO, optional
        Stream to read from. Standard input is used when omitted.

    Returns
    -------
    int
        Number of seats available in every department.
    """
    if stream is None:
        stream = sys.stdin
    token = None
    for line in stream:
        tokens = line.split()
        if tokens:
            token = tokens[0]
            break
    if token is None:
        raise InvalidCapacityError("Expected the department capacity on standard input, got nothing")
    if not INTEGER_RE.fullmatch(token):
        raise InvalidCapacityError(f"Department capacity must be an integer, got {token!r}")
    capacity = int(token)
    if capacity < 0:
        raise InvalidCapacityError(f"Department capacity must not be negative, got {capacity}")
    return capacity


def _parse_grade(name: str, raw: str, line_number: Optional[int]) -> float:
    if not DECIMAL_RE.fullmatch(raw):
        raise MalformedRecordError(f"{name} grade is not a number: {raw!r}", line_number)
    value = float(raw)
    if not math.isfinite(value):
        raise MalformedRecordError(f"{name} grade is not finite: {raw!r}", line_number)
    return value


def parse_fields(fields: Sequence[str], line_number: Optional[int] = None) -> Applicant:
    """Build an ``Applicant`` from the ten fields of one record."""
    if len(fields) != FIELD_COUNT:
        raise MalformedRecordError(f"expected {FIELD_COUNT} fields, got {len(fields)}", line_number)
    first_name, last_name = fields[0], fields[1]
    grades = {
        name: _parse_grade(name, raw, line_number)
        for name, raw in zip(GRADE_FIELDS, fields[2:7])
    }
    preference_names = tuple(fields[7:10])
    priorities = {}
    for priority, name in enumerate(preference_names, start=1):
        department = Department.lookup(name)
        if department is None:
            logger.warning("%s %s: unknown department %r at priority %d", first_name, last_name, name, priority)
        priorities[priority] = department
    return Applicant(
        first_name=first_name,
        last_name=last_name,
        scores=compute_department_scores(**grades),
        priorities=priorities,
        preference_names=preference_names,
    )


def parse_applicant(line: str, line_number: Optional[int] = None) -> Applicant:
    """
    Parse one line of the applicant file.

    Parameters
    ----------
    line : str
        Raw record text.
    line_number : int, optional
        1-based position of the line in its file, used in error
        messages.

    Returns
    -------
    Applicant
        Applicant with all five department scores computed.

    Raises
    ------
    MalformedRecordError
        If the line does not have exactly ten fields or a grade is not
        a finite number.
    """
    return parse_fields(line.split(), line_number)


def load_applicants(path: Union[str, Path]) -> List[Applicant]:
    """
    Load every applicant from the source file.

    Blank lines are skipped. Applicants are returned in file order.
    """
    path = Path(path)
    applicants: List[Applicant] = []
    try:
        with path.open(encoding="utf-8") as handle:
            for line_number, line in enumerate(handle, start=1):
                if not line.strip():
                    continue
                applicants.append(parse_applicant(line, line_number))
    except (OSError, UnicodeDecodeError) as exc:
        raise ApplicantFileError(f"Cannot read applicant file {path}: {exc}") from exc
    logger.info("Loaded %d applicants from %s", len(applicants), path)
    return applicants
