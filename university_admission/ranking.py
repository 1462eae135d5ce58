"""
Ordering of applicants within a department.

Applicants are ranked by their composite score for the department in
descending order. Equal scores are broken by the full name in
ascending lexicographic order, which makes the ranking a total order:
the capacity cut-off always lands on the same applicants.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Tuple

from university_admission.models import Applicant, Department


def ranking_key(department: Department) -> Callable[[Applicant], Tuple[float, str]]:
    """Return a sort key ranking applicants for ``department``."""

    def key(applicant: Applicant) -> Tuple[float, str]:
        return (-applicant.score_for(department), applicant.full_name)

    return key


def sort_by_department_score(applicants: Iterable[Applicant], department: Department) -> List[Applicant]:
    """Return ``applicants`` sorted by score for ``department`` (best first)."""
    return sorted(applicants, key=ranking_key(department))


def rank_applicants(applicants: Iterable[Applicant], department: Department, priority: int) -> List[Applicant]:
    """
    Rank the applicants who chose ``department`` at the given priority.

    Parameters
    ----------
    applicants : iterable of Applicant
        Candidates to consider, typically the pool of applicants not
        admitted anywhere yet.
    department : Department
        Department the ranking is built for.
    priority : int
        Preference rank to match (1 is the most preferred).

    Returns
    -------
    list[Applicant]
        Matching applicants, highest score first, ties by full name.
    """
    candidates = [a for a in applicants if a.preference(priority) is department]
    return sort_by_department_score(candidates, department)
