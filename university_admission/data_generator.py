"""
Utility functions for generating synthetic applicant files.

This module contains helpers to construct randomised applicant data
for testing and demonstration purposes. The generated files follow the
record layout expected by ``parser.load_applicants``.

It can also be run as a script::

    python -m university_admission.data_generator 200 applicants.txt --seed 7
"""

from __future__ import annotations

import argparse
import random
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from university_admission.logger import logger
from university_admission.models import Department

COLUMNS = [
    'FirstName', 'LastName', 'Physics', 'Chemistry', 'Math', 'CS', 'Admission',
    'Priority1', 'Priority2', 'Priority3',
]

FIRST_NAMES = [
    'Amy', 'Anna', 'Bob', 'Carla', 'Dmitri', 'Elena', 'Farah', 'George', 'Hana', 'Ivan',
    'Jamal', 'Kira', 'Liam', 'Maria', 'Noah', 'Olga', 'Pavel', 'Quinn', 'Rosa', 'Sami',
]
LAST_NAMES = [
    'Adams', 'Brown', 'Chen', 'Diaz', 'Evans', 'Fox', 'Garcia', 'Hughes', 'Ito', 'Jones',
    'Kim', 'Lee', 'Moreau', 'Novak', 'Ortiz', 'Petrov', 'Quint', 'Rossi', 'Smith', 'Tanaka',
]


def generate_random_applicants(num_applicants: int, seed: Optional[int] = None) -> pd.DataFrame:
    """
    Generate a random applicant table.

    Parameters
    ----------
    num_applicants : int
        Number of applicants to generate.
    seed : int, optional
        Seed for the random generator; the same seed yields the same
        table.

    Returns
    -------
    pandas.DataFrame
        A DataFrame with the columns listed in ``COLUMNS``. Full names
        are unique, grades are integers between 0 and 100 and the three
        preferences are distinct departments.
    """
    rng = random.Random(seed)
    departments = [d.display_name for d in Department]
    rows = []
    used_names: set[str] = set()
    for idx in range(num_applicants):
        first = rng.choice(FIRST_NAMES)
        last = rng.choice(LAST_NAMES)
        if f"{first} {last}" in used_names:
            # Keep full names unique by suffixing the running number
            last = f"{last}{idx}"
        used_names.add(f"{first} {last}")
        preferences = rng.sample(departments, 3)
        rows.append({
            'FirstName': first,
            'LastName': last,
            'Physics': rng.randint(0, 100),
            'Chemistry': rng.randint(0, 100),
            'Math': rng.randint(0, 100),
            'CS': rng.randint(0, 100),
            'Admission': rng.randint(0, 100),
            'Priority1': preferences[0],
            'Priority2': preferences[1],
            'Priority3': preferences[2],
        })
    return pd.DataFrame(rows, columns=COLUMNS)


def write_applicants_file(df: pd.DataFrame, path: Union[str, Path]) -> Path:
    """Write an applicant table as a space-separated file without header."""
    path = Path(path)
    df[COLUMNS].to_csv(path, sep=' ', header=False, index=False)
    logger.info("Wrote %d applicants to %s", len(df), path)
    return path


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Generate a random applicant file.")
    parser.add_argument("count", type=int, help="number of applicants")
    parser.add_argument("path", nargs="?", default="applicants.txt", help="output file")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    df = generate_random_applicants(args.count, seed=args.seed)
    write_applicants_file(df, args.path)


if __name__ == '__main__':
    main()
