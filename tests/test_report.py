"""
Tests for the PDF report.

The content of the PDF is not inspected; the tests make sure that a
valid document is produced for finished, partial and empty runs.
"""

import pytest
from fpdf.errors import FPDFException

from university_admission.enrolment import DepartmentsEnrolment
from university_admission.errors import OutputWriteError
from university_admission.models import Applicant, Department
from university_admission.report import ReportGenerator


def make_applicant(full_name, preferences, score):
    first, last = full_name.split()
    return Applicant(
        first_name=first,
        last_name=last,
        scores={d: float(score) for d in Department},
        priorities={p: Department.lookup(name) for p, name in enumerate(preferences, start=1)},
        preference_names=tuple(preferences),
    )


def test_report_for_finished_run(tmp_path):
    applicants = [
        make_applicant('Amy Lee', ['Physics', 'Biotech', 'Chemistry'], 90),
        make_applicant('Bob Fox', ['Physics', 'Biotech', 'Chemistry'], 80),
        make_applicant('Carla Diaz', ['Physics', 'Biotech', 'Chemistry'], 70),
        make_applicant('Dmitri Ito', ['Physics', 'Biotech', 'Chemistry'], 60),
    ]
    enrolment = DepartmentsEnrolment(1, applicants)
    enrolment.run(3)
    path = tmp_path / 'report.pdf'
    ReportGenerator(enrolment).generate(path)
    assert path.read_bytes().startswith(b'%PDF')


def test_report_before_any_wave(tmp_path):
    enrolment = DepartmentsEnrolment(3, [])
    path = tmp_path / 'empty.pdf'
    ReportGenerator(enrolment).generate(path)
    assert path.read_bytes().startswith(b'%PDF')


def test_report_write_failure(tmp_path):
    enrolment = DepartmentsEnrolment(1, [])
    enrolment.run(1)
    with pytest.raises(OutputWriteError):
        ReportGenerator(enrolment).generate(tmp_path / 'missing' / 'report.pdf')


def test_report_with_non_latin_names(tmp_path):
    applicants = [
        make_applicant('Иван Петров', ['Physics', 'Biotech', 'Chemistry'], 90),
        make_applicant('Ελένη Παππά', ['Physics', 'Biotech', 'Chemistry'], 80),
        make_applicant('Ольга Смирнова', ['Астрономия', 'Physics', 'Physics'], 70),
    ]
    enrolment = DepartmentsEnrolment(1, applicants)
    enrolment.run(3)
    # The unplaced page lists Ольга with the unrecognised first choice
    assert [a.full_name for a in enrolment.unplaced()] == ['Ольга Смирнова']
    path = tmp_path / 'report.pdf'
    ReportGenerator(enrolment).generate(path)
    assert path.read_bytes().startswith(b'%PDF')


def test_layout_failure_becomes_output_error(tmp_path, monkeypatch):
    def broken_build(self, plot_path):
        raise FPDFException('layout failed')

    monkeypatch.setattr(ReportGenerator, '_build', broken_build)
    enrolment = DepartmentsEnrolment(1, [])
    with pytest.raises(OutputWriteError):
        ReportGenerator(enrolment).generate(tmp_path / 'report.pdf')
