"""
University admission wave simulation.

The package reads applicant records from a flat text file, computes a
composite score for each of the five fixed departments and allocates a
uniform number of seats per department over several priority waves.
The resulting rosters are written to one text file per department.
"""

from __future__ import annotations

from university_admission.enrolment import DepartmentsEnrolment
from university_admission.models import WAVE_ORDER, Admission, Applicant, Department

__all__ = [
    "Admission",
    "Applicant",
    "Department",
    "DepartmentsEnrolment",
    "WAVE_ORDER",
]
