"""
Unit tests for the department enumeration and the applicant record.
"""

import dataclasses

import pytest

from university_admission.models import WAVE_ORDER, Applicant, Department


def test_department_file_names_are_lowercase():
    assert [d.file_name for d in WAVE_ORDER] == [
        'mathematics.txt',
        'engineering.txt',
        'physics.txt',
        'biotech.txt',
        'chemistry.txt',
    ]


def test_wave_order_covers_every_department_once():
    assert len(WAVE_ORDER) == 5
    assert set(WAVE_ORDER) == set(Department)


def test_lookup_unknown_department_returns_none():
    assert Department.lookup('Physics') is Department.PHYSICS
    assert Department.lookup('physics') is None
    assert Department.lookup('Astronomy') is None


def test_applicant_is_immutable():
    applicant = Applicant(
        first_name='Amy',
        last_name='Lee',
        scores={d: 50.0 for d in Department},
        priorities={1: Department.PHYSICS, 2: None, 3: Department.BIOTECH},
    )
    assert applicant.full_name == 'Amy Lee'
    assert applicant.preference(1) is Department.PHYSICS
    assert applicant.preference(2) is None
    assert applicant.preference(4) is None
    with pytest.raises(dataclasses.FrozenInstanceError):
        applicant.first_name = 'Anna'
    with pytest.raises(TypeError):
        applicant.scores[Department.PHYSICS] = 99.0


def test_applicants_compare_by_name():
    a = Applicant('Amy', 'Lee', {d: 50.0 for d in Department}, {1: Department.PHYSICS})
    b = Applicant('Amy', 'Lee', {d: 70.0 for d in Department}, {1: Department.BIOTECH})
    assert a == b
    assert hash(a) == hash(b)
