"""
Rendering and writing of department rosters.

A roster is rendered as one ``"<full name> <score>"`` line per admitted
applicant, best ranked first, with the score shown to two decimal
places. Every department gets its own file named after the department
in lower case (``mathematics.txt`` and so on).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Union

from university_admission.enrolment import DepartmentsEnrolment
from university_admission.errors import OutputWriteError
from university_admission.logger import logger
from university_admission.models import WAVE_ORDER, Applicant, Department
from university_admission.ranking import sort_by_department_score


def format_roster(applicants: Iterable[Applicant], department: Department) -> str:
    """Render a department roster as text without a trailing newline."""
    lines = [
        f"{applicant.full_name} {applicant.score_for(department):.2f}"
        for applicant in sort_by_department_score(applicants, department)
    ]
    return "\n".join(lines).strip()


def render_rosters(enrolment: DepartmentsEnrolment) -> Dict[Department, str]:
    """Render the roster of every department in wave order."""
    return {department: format_roster(roster, department) for department, roster in enrolment.rosters().items()}


def write_rosters(enrolment: DepartmentsEnrolment, output_dir: Union[str, Path] = ".") -> List[Path]:
    """
    Write one roster file per department.

    All rosters are rendered before the first file is opened. Existing
    files are overwritten.

    Parameters
    ----------
    enrolment : DepartmentsEnrolment
        Enrolment whose rosters are written, normally after ``run``.
    output_dir : str or Path
        Directory receiving the files. It must already exist.

    Returns
    -------
    list[Path]
        Paths of the written files in wave order.

    Raises
    ------
    OutputWriteError
        If a file cannot be written. Files written before the failure
        are left in place.
    """
    output_dir = Path(output_dir)
    rendered = render_rosters(enrolment)
    written: List[Path] = []
    for department in WAVE_ORDER:
        path = output_dir / department.file_name
        try:
            path.write_text(rendered[department], encoding="utf-8")
        except OSError as exc:
            raise OutputWriteError(f"Cannot write roster for {department.display_name} to {path}: {exc}") from exc
        logger.debug("Wrote %s", path)
        written.append(path)
    logger.info("Wrote %d roster files to %s", len(written), output_dir)
    return written
