"""Group size planning: how many groups per round and how large each one is."""

import math


def plan_group_sizes(n: int, desired_group_size: int) -> list[int]:
    """Return the target size of every group, identical for all rounds.

    The number of groups is ``ceil(n / desired_group_size)``; participants
    are spread so sizes differ by at most one, larger groups first.
    """
    if desired_group_size < 1:
        raise ValueError(f"desired_group_size must be >= 1, got {desired_group_size}")
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    if n == 0:
        return []

    groups = math.ceil(n / desired_group_size)
    base, extra = divmod(n, groups)
    return [base + 1 if i < extra else base for i in range(groups)]


def group_size_for(n: int, number_of_groups: int) -> int:
    """Desired group size for a requested number of groups (never below 2)."""
    return max(2, n // max(1, number_of_groups))
