"""
Wave-based seat allocation across the five departments.

This module defines the ``DepartmentsEnrolment`` class which owns the
whole mutable state of an admission run: the uniform department
capacity, the roster of every department and the pool of applicants
not yet admitted anywhere.

Seats are allocated in waves. Wave *i* only considers the applicants'
*i*-th preference. Within a wave the departments are visited in a
fixed order (see ``models.WAVE_ORDER``); each department takes the best
ranked applicants from the pool until its seats run out, and admitted
applicants leave the pool at once so that no later department in the
same wave can claim them. Seats once granted are never withdrawn.
Applicants not admitted after the last wave remain in the pool.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple, Union

import pandas as pd

from university_admission.logger import logger
from university_admission.models import WAVE_ORDER, Admission, Applicant, Department
from university_admission.ranking import rank_applicants, sort_by_department_score

UNDERFILLED = "UNDERFILLED"


class DepartmentsEnrolment:
    """Allocation state of a single admission run."""

    def __init__(self, capacity: int, applicants: Iterable[Applicant]) -> None:
        """
        Initialise empty rosters and put every applicant into the pool.

        Parameters
        ----------
        capacity : int
            Number of seats in every department.
        applicants : iterable of Applicant
            Parsed applicants. Applicants are keyed by full name; a
            later record with the same full name replaces an earlier
            one.
        """
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self._capacity = capacity
        self._rosters: Dict[Department, List[Applicant]] = {department: [] for department in WAVE_ORDER}
        self._pool: Dict[str, Applicant] = {applicant.full_name: applicant for applicant in applicants}
        self._admissions: List[Admission] = []
        self._waves_run = 0

    # ------------------------------------------------------------------
    # Allocation
    # ------------------------------------------------------------------
    def run(self, wave_count: int) -> None:
        """Run ``wave_count`` waves; wave *i* uses priority *i*."""
        if wave_count < 1:
            raise ValueError(f"wave_count must be a positive integer, got {wave_count}")
        logger.info(
            "Starting enrolment: %d applicants, %d seats per department, %d waves",
            len(self._pool),
            self._capacity,
            wave_count,
        )
        for priority in range(1, wave_count + 1):
            self.run_wave(priority)
        logger.info("Enrolment finished: %d admitted, %d unplaced", len(self._admissions), len(self._pool))

    def run_wave(self, priority: int) -> None:
        """Offer seats to applicants whose ``priority``-th choice is each department."""
        for department in WAVE_ORDER:
            self.admit_for_department(department, priority)
        self._waves_run = max(self._waves_run, priority)

    def admit_for_department(self, department: Department, priority: int) -> List[Applicant]:
        """
        Fill the free seats of one department from the pool.

        Applicants in the pool whose preference at ``priority`` is
        ``department`` are ranked and the best of them are admitted
        until the department is full. Admitted applicants are removed
        from the pool before this method returns.

        Parameters
        ----------
        department : Department
            Department whose seats are being filled.
        priority : int
            Preference rank considered in this step; equals the wave
            number.

        Returns
        -------
        list[Applicant]
            Applicants admitted in this step, best ranked first. Empty
            when the department was already full or nobody applied.
        """
        roster = self._rosters[department]
        free_seats = self._capacity - len(roster)
        if free_seats <= 0:
            return []
        ranked = rank_applicants(self._pool.values(), department, priority)
        if not ranked:
            return []
        admitted = ranked[:free_seats]
        roster.extend(admitted)
        for applicant in admitted:
            del self._pool[applicant.full_name]
            self._admissions.append(Admission(wave=priority, department=department, applicant=applicant))
        logger.info(
            "Wave %d: %s admitted %d of %d candidates (%d/%d seats taken)",
            priority,
            department.display_name,
            len(admitted),
            len(ranked),
            len(roster),
            self._capacity,
        )
        return admitted

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def waves_run(self) -> int:
        """Highest wave number processed so far."""
        return self._waves_run

    @property
    def pool(self) -> Mapping[str, Applicant]:
        """Read-only view of the applicants not admitted anywhere yet."""
        return MappingProxyType(self._pool)

    @property
    def admissions(self) -> Tuple[Admission, ...]:
        """Every admission in the order it happened."""
        return tuple(self._admissions)

    def roster(self, department: Department) -> List[Applicant]:
        """Return the department's admitted applicants, best ranked first."""
        return sort_by_department_score(self._rosters[department], department)

    def rosters(self) -> Dict[Department, List[Applicant]]:
        """Return the sorted roster of every department in wave order."""
        return {department: self.roster(department) for department in WAVE_ORDER}

    def unplaced(self) -> List[Applicant]:
        """Return the applicants left in the pool sorted by full name."""
        return sorted(self._pool.values(), key=lambda a: a.full_name)

    def statistics(self) -> pd.DataFrame:
        """
        Summarise the allocation per department.

        Returns
        -------
        pandas.DataFrame
            One row per department (index ``Department`` holding the
            display name, in wave order) with the columns ``Capacity``,
            ``Wave1`` .. ``WaveN`` (admissions per wave), ``Admitted``,
            ``Free`` and ``Cutoff``. ``Cutoff`` is the lowest admitted
            score when the department is full and ``'UNDERFILLED'``
            otherwise.
        """
        last_wave = max([self._waves_run, *(admission.wave for admission in self._admissions)])
        wave_columns = [f"Wave{wave}" for wave in range(1, last_wave + 1)]
        rows = []
        for department in WAVE_ORDER:
            roster = self.roster(department)
            per_wave = {column: 0 for column in wave_columns}
            for admission in self._admissions:
                if admission.department is department:
                    per_wave[f"Wave{admission.wave}"] += 1
            cutoff: Union[float, str]
            if roster and len(roster) >= self._capacity:
                cutoff = roster[-1].score_for(department)
            else:
                cutoff = UNDERFILLED
            rows.append({
                'Department': department.display_name,
                'Capacity': self._capacity,
                **per_wave,
                'Admitted': len(roster),
                'Free': self._capacity - len(roster),
                'Cutoff': cutoff,
            })
        columns = ['Department', 'Capacity', *wave_columns, 'Admitted', 'Free', 'Cutoff']
        return pd.DataFrame(rows, columns=columns).set_index('Department')
