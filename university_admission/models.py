"""
Domain models for the admission simulation.

``Department`` is the closed set of five departments that accept
applicants. ``Applicant`` is an immutable record built once when the
applicant file is parsed: it carries the composite score for every
department and the departments chosen at each priority rank.
``Admission`` records which wave admitted an applicant to which
department.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


class Department(enum.Enum):
    """The five departments taking part in the admission."""

    MATHEMATICS = "Mathematics"
    PHYSICS = "Physics"
    BIOTECH = "Biotech"
    CHEMISTRY = "Chemistry"
    ENGINEERING = "Engineering"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def file_name(self) -> str:
        """Name of the roster file, e.g. ``mathematics.txt``."""
        return f"{self.value.lower()}.txt"

    @classmethod
    def lookup(cls, name: str) -> Optional["Department"]:
        """Return the department called ``name`` or ``None`` if there is none.

        Preference names in the applicant file are not validated, so an
        unknown name simply never matches any department.
        """
        for department in cls:
            if department.value == name:
                return department
        return None


# Departments are processed in this order within every wave and the
# roster files are written in the same order.
WAVE_ORDER: Tuple[Department, ...] = (
    Department.MATHEMATICS,
    Department.ENGINEERING,
    Department.PHYSICS,
    Department.BIOTECH,
    Department.CHEMISTRY,
)


@dataclass(frozen=True)
class Applicant:
    """An applicant with precomputed department scores and preferences.

    Attributes:
        first_name: Applicant's first name
        last_name: Applicant's last name
        scores: Composite score for each department
        priorities: Department chosen at each priority rank (1 is the
            most preferred); ``None`` where the name was not recognised
        preference_names: Department names exactly as they appeared in
            the source record
    """

    first_name: str
    last_name: str
    scores: Mapping[Department, float] = field(compare=False)
    priorities: Mapping[int, Optional[Department]] = field(compare=False)
    preference_names: Tuple[str, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        # Freeze the mappings so the record cannot change after parsing.
        object.__setattr__(self, "scores", MappingProxyType(dict(self.scores)))
        object.__setattr__(self, "priorities", MappingProxyType(dict(self.priorities)))

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def score_for(self, department: Department) -> float:
        return self.scores[department]

    def preference(self, priority: int) -> Optional[Department]:
        return self.priorities.get(priority)


@dataclass(frozen=True)
class Admission:
    """One applicant admitted to a department during a wave."""

    wave: int
    department: Department
    applicant: Applicant
