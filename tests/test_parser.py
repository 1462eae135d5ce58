"""
Unit tests for parsing the capacity and the applicant file.

Malformed input of any kind must abort the run with an
``AdmissionError`` subclass rather than produce partial data.
"""

import io

import pytest

from university_admission.errors import ApplicantFileError, InvalidCapacityError, MalformedRecordError
from university_admission.models import Department
from university_admission.parser import load_applicants, parse_applicant, read_capacity


def test_parse_applicant_computes_scores_and_priorities():
    applicant = parse_applicant('Amy Lee 90 75 88 92 80 Physics Mathematics Engineering')
    assert applicant.first_name == 'Amy'
    assert applicant.last_name == 'Lee'
    assert applicant.score_for(Department.PHYSICS) == 89
    assert applicant.score_for(Department.CHEMISTRY) == 80
    assert applicant.score_for(Department.MATHEMATICS) == 88
    assert applicant.score_for(Department.ENGINEERING) == 90
    assert applicant.score_for(Department.BIOTECH) == 82.5
    assert applicant.preference(1) is Department.PHYSICS
    assert applicant.preference(2) is Department.MATHEMATICS
    assert applicant.preference(3) is Department.ENGINEERING


def test_parse_applicant_accepts_decimal_grades_and_extra_spaces():
    applicant = parse_applicant('  Bob   Fox 70.5 60 71.5\t80 50 Biotech Chemistry Physics\n')
    assert applicant.full_name == 'Bob Fox'
    assert applicant.score_for(Department.PHYSICS) == 71


def test_unknown_preference_never_matches():
    applicant = parse_applicant('Amy Lee 90 75 88 92 80 Astronomy Mathematics Engineering')
    assert applicant.preference(1) is None
    assert applicant.preference_names == ('Astronomy', 'Mathematics', 'Engineering')


@pytest.mark.parametrize('line', [
    'Amy Lee 90 75 eighty 92 80 Physics Mathematics Engineering',
    'Amy Lee 90 75 88 92 nan Physics Mathematics Engineering',
    'Amy Lee 90 75 88 inf 80 Physics Mathematics Engineering',
    'Amy Lee 90 75 88 92 80 Physics Mathematics',
    'Amy Lee 90 75 88 92 80 Physics Mathematics Engineering Biotech',
    'Amy Lee 90 75 8_8 92 80 Physics Mathematics Engineering',
    'Amy Lee 90 75 88 ９2 80 Physics Mathematics Engineering',
    'Amy Lee 90 75 88 92 1e999 Physics Mathematics Engineering',
])
def test_malformed_records_are_fatal(line):
    with pytest.raises(MalformedRecordError):
        parse_applicant(line)


def test_load_applicants_skips_blank_lines(tmp_path):
    path = tmp_path / 'applicants.txt'
    path.write_text(
        'Amy Lee 90 75 88 92 80 Physics Mathematics Engineering\n'
        '\n'
        'Bob Fox 70 60 71 80 50 Biotech Chemistry Physics\n',
        encoding='utf-8',
    )
    applicants = load_applicants(path)
    assert [a.full_name for a in applicants] == ['Amy Lee', 'Bob Fox']


def test_load_applicants_reports_line_number(tmp_path):
    path = tmp_path / 'applicants.txt'
    path.write_text(
        'Amy Lee 90 75 88 92 80 Physics Mathematics Engineering\n'
        'Bob Fox 70 x 71 80 50 Biotech Chemistry Physics\n',
        encoding='utf-8',
    )
    with pytest.raises(MalformedRecordError) as excinfo:
        load_applicants(path)
    assert excinfo.value.line_number == 2
    assert 'line 2' in str(excinfo.value)


def test_missing_applicant_file_is_fatal(tmp_path):
    with pytest.raises(ApplicantFileError):
        load_applicants(tmp_path / 'missing.txt')


def test_read_capacity():
    assert read_capacity(io.StringIO('7\n')) == 7
    assert read_capacity(io.StringIO('\n  3 \n')) == 3
    assert read_capacity(io.StringIO('0')) == 0
    assert read_capacity(io.StringIO('+5\n')) == 5


@pytest.mark.parametrize('text', ['', 'ten\n', '2.5\n', '-1\n', '1_0\n', '٣\n', '0x10\n'])
def test_invalid_capacity_is_fatal(text):
    with pytest.raises(InvalidCapacityError):
        read_capacity(io.StringIO(text))
