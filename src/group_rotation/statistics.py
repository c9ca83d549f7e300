"""Pairing statistics and sanity checks for a finished schedule."""

from collections import Counter
from itertools import combinations
from typing import Sequence

import pandas as pd

from .models import Participant, Schedule


def pair_count_matrix(schedule: Schedule, participants: Sequence[Participant]) -> pd.DataFrame:
    """Square table of how many rounds each pair of participants shared a group.

    Rows and columns follow the order of ``participants``; the diagonal is
    ``<NA>``.
    """
    people = list(participants)
    position = {p: i for i, p in enumerate(people)}
    counts = [[0] * len(people) for _ in people]

    for round_groups in schedule:
        for group in round_groups:
            for a, b in combinations(group, 2):
                i, j = position[a], position[b]
                counts[i][j] += 1
                counts[j][i] += 1

    df = pd.DataFrame(counts, index=people, columns=people, dtype="Int64")
    for i in range(len(people)):
        df.iat[i, i] = pd.NA
    return df


def pairing_summary(schedule: Schedule, participants: Sequence[Participant]) -> dict:
    """Spread of pair counts over every unordered pair of participants."""
    people = list(participants)
    counter: Counter = Counter()
    for round_groups in schedule:
        for group in round_groups:
            for a, b in combinations(group, 2):
                counter[frozenset((a, b))] += 1

    values = [counter[frozenset(pair)] for pair in combinations(people, 2)]
    if not values:
        return {"max_count": 0, "min_count": 0, "imbalance": 0,
                "repeated_pairs": 0, "unmet_pairs": 0}

    return {
        "max_count": max(values),
        "min_count": min(values),
        "imbalance": max(values) - min(values),
        "repeated_pairs": sum(1 for v in values if v > 1),
        "unmet_pairs": sum(1 for v in values if v == 0),
    }


def check_schedule(
    schedule: Schedule,
    participants: Sequence[Participant],
    target_sizes: Sequence[int],
) -> tuple[bool, list[str]]:
    """Check every round is a partition of the roster with the planned sizes."""
    violations: list[str] = []
    roster = set(participants)
    expected_sizes = sorted(target_sizes)

    for round_index, round_groups in enumerate(schedule, start=1):
        placed = [p for group in round_groups for p in group]
        duplicates = sorted(str(p) for p, c in Counter(placed).items() if c > 1)
        if duplicates:
            violations.append(f"Round {round_index}: placed more than once: {', '.join(duplicates)}")
        missing = roster - set(placed)
        if missing:
            violations.append(f"Round {round_index}: {len(missing)} missing")
        unknown = set(placed) - roster
        if unknown:
            violations.append(f"Round {round_index}: {len(unknown)} not on the roster")
        sizes = sorted(len(group) for group in round_groups)
        if sizes != expected_sizes:
            violations.append(f"Round {round_index}: group sizes {sizes} != {expected_sizes}")

    return len(violations) == 0, violations
