"""
Entry point for the admission wave simulation.

The script reads the number of seats per department from standard
input, loads the applicant file, runs the admission waves and writes
one roster file per department. If executed as a module
(``python -m university_admission.main``) or through the
``university-admission`` console script, locations and the number of
waves are taken from ``config.settings``.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from university_admission.config import settings
from university_admission.enrolment import DepartmentsEnrolment
from university_admission.errors import AdmissionError
from university_admission.logger import logger
from university_admission.parser import load_applicants, read_capacity
from university_admission.roster import write_rosters


def run_admission(stdin: Optional[TextIO] = None) -> DepartmentsEnrolment:
    """Run the whole pipeline and return the finished enrolment."""
    capacity = read_capacity(stdin)
    applicants = load_applicants(settings.applicants_file)
    enrolment = DepartmentsEnrolment(capacity, applicants)
    enrolment.run(settings.wave_count)
    write_rosters(enrolment, settings.output_dir)
    if settings.report_path is not None:
        from university_admission.report import ReportGenerator

        ReportGenerator(enrolment).generate(settings.report_path)
    return enrolment


def main(stdin: Optional[TextIO] = None) -> int:
    try:
        run_admission(stdin)
    except AdmissionError as exc:
        logger.error("Admission run aborted: %s", exc)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
