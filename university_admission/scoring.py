"""Composite score calculation for each department."""

from __future__ import annotations

from typing import Dict

from university_admission.models import Department


def compute_department_scores(
    physics: float,
    chemistry: float,
    math: float,
    computer_science: float,
    admission: float,
) -> Dict[Department, float]:
    """
    Compute the composite score of an applicant for every department.

    Each department averages the subject grades relevant to it and
    takes the larger of that value and the admission exam grade. No
    rounding is applied here; scores are rounded only when rosters are
    formatted.

    Parameters
    ----------
    physics, chemistry, math, computer_science : float
        Subject grades of the applicant.
    admission : float
        Grade of the admission exam.

    Returns
    -------
    dict[Department, float]
        One composite score per department.
    """
    return {
        Department.PHYSICS: max((physics + math) / 2, admission),
        Department.CHEMISTRY: max(chemistry, admission),
        Department.MATHEMATICS: max(math, admission),
        Department.ENGINEERING: max((computer_science + math) / 2, admission),
        Department.BIOTECH: max((chemistry + physics) / 2, admission),
    }
