"""Greedy construction of a single round."""

from typing import Sequence

from .history import PairHistory
from .models import RoundResult, SearchConfig


def placement_delta(
    participant: int,
    group: Sequence[int],
    history: PairHistory,
    config: SearchConfig,
) -> int:
    """Cost of adding ``participant`` to ``group`` given the history so far.

    Recent meetings dominate older history, which dominates the small
    push towards emptier groups.
    """
    delta = history.placement_cost(
        participant, group, config.history_weight, config.recent_weight
    )
    return delta + config.skew_weight * len(group)


def assign_round(
    order: Sequence[int],
    target_sizes: Sequence[int],
    history: PairHistory,
    config: SearchConfig,
) -> RoundResult:
    """Place participants one by one into the cheapest group with room left.

    ``order`` is the visiting order (a shuffled permutation of the
    participant indices). Equal deltas go to the lowest group index, so the
    result is fully determined by the order and the history.
    """
    groups: list[list[int]] = [[] for _ in target_sizes]
    delta_sum = 0

    for participant in order:
        best_group_idx = -1
        best_delta = 0

        for i, group in enumerate(groups):
            if len(group) >= target_sizes[i]:
                continue
            delta = placement_delta(participant, group, history, config)
            if best_group_idx == -1 or delta < best_delta:
                best_delta = delta
                best_group_idx = i

        if best_group_idx == -1:
            return RoundResult.failed()

        groups[best_group_idx].append(participant)
        delta_sum += best_delta

    return RoundResult.success(groups, delta_sum)
