"""
Restart search over complete multi-round schedules.

Algorithm: runs many independent randomized restarts, keeps the best one.
- Every restart starts from an empty pair history
- Each round visits participants in a fresh random order and places them
  greedily (see assigner.assign_round)
- A restart whose round cannot be built is dropped as a whole
- Finished restarts are ranked by scoring.score; lowest wins

Each restart draws from its own generator spawned from one master seed, so
a restart's result depends only on the seed and its index. That keeps the
winner identical whether restarts run in-process or on a process pool.
"""

import logging
import time
from concurrent.futures import ProcessPoolExecutor
from typing import Callable, Optional, Sequence

import numpy as np

from .assigner import assign_round
from .history import PairHistory
from .models import Participant, RestartResult, Schedule, ScheduleResult, SearchConfig
from .planner import plan_group_sizes
from .scoring import score

logger = logging.getLogger(__name__)


# Exceptions
class SchedulingError(Exception):
    """Base exception for scheduling errors."""
    pass


class NoFeasibleScheduleError(SchedulingError):
    """Every attempted restart failed to build a full schedule."""
    pass


# ---------------------------------------------------------------------------
# Single restart
# ---------------------------------------------------------------------------

def run_restart(
    n: int,
    target_sizes: Sequence[int],
    round_count: int,
    config: SearchConfig,
    rng: np.random.Generator,
    restart_index: int = 0,
) -> RestartResult | None:
    """Build one complete candidate schedule, or None if a round fails."""
    history = PairHistory(n, window_size=config.window_size)
    rounds: list[list[list[int]]] = []
    total_delta = 0

    for round_index in range(round_count):
        order = rng.permutation(n).tolist()
        result = assign_round(order, target_sizes, history, config)
        if not result.ok:
            logger.debug("Restart %d: round %d infeasible, dropping restart",
                         restart_index, round_index + 1)
            return None
        total_delta += result.delta_score
        history.record_round(result.groups)
        rounds.append(result.groups)

    imbalance = history.imbalance()
    return RestartResult(
        restart_index=restart_index,
        rounds=rounds,
        total_delta=total_delta,
        imbalance=imbalance,
        score=score(total_delta, imbalance),
    )


def _run_seeded_restart(
    n: int,
    target_sizes: list[int],
    round_count: int,
    config: SearchConfig,
    seed_seq: np.random.SeedSequence,
    restart_index: int,
) -> RestartResult | None:
    # Module level so the process pool can pickle it
    rng = np.random.default_rng(seed_seq)
    return run_restart(n, target_sizes, round_count, config, rng, restart_index)


def _is_better(candidate: RestartResult, best: RestartResult | None) -> bool:
    if best is None:
        return True
    return (candidate.score, candidate.restart_index) < (best.score, best.restart_index)


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------

def search_schedule(
    participants: Sequence[Participant],
    group_size: int,
    round_count: int,
    config: SearchConfig | None = None,
    *,
    seed: Optional[int] = None,
    max_workers: Optional[int] = None,
    deadline: Optional[float] = None,
    progress_callback: Callable[[int, int, Optional[int]], None] | None = None,
) -> ScheduleResult:
    """
    Run the restart search and return the best schedule found.

    Args:
        participants: Ordered, distinct participant identifiers
        group_size: Desired group size (callers clamp it to at least 2)
        round_count: Number of rounds to schedule
        config: Weights, recency window and restart count (defaults if None)
        seed: Master seed; equal seeds give equal schedules
        max_workers: Run restarts on a process pool of this size (None or 1: in-process)
        deadline: Wall-clock budget in seconds; no new restarts start once it expires
        progress_callback: Optional fn(restarts_done, restart_count, best_score)

    Returns:
        ScheduleResult with the winning schedule and search statistics

    Raises:
        ValueError: On a non-positive group size, negative round count or duplicate participants
        NoFeasibleScheduleError: If no attempted restart produced a schedule
    """
    if config is None:
        config = SearchConfig()
    if group_size < 1:
        raise ValueError(f"group_size must be >= 1, got {group_size}")
    if round_count < 0:
        raise ValueError(f"round_count must be >= 0, got {round_count}")

    people = list(participants)
    if len(set(people)) != len(people):
        raise ValueError("participants must be distinct")

    n = len(people)
    if n == 0:
        return ScheduleResult(schedule=Schedule(), score=0, restarts_run=0,
                              restarts_failed=0, best_restart=-1)

    target_sizes = plan_group_sizes(n, group_size)
    seed_seqs = np.random.SeedSequence(seed).spawn(config.restart_count)

    logger.info("Scheduling %d participants into %d groups for %d rounds (%d restarts)",
                n, len(target_sizes), round_count, config.restart_count)

    start = time.monotonic()

    def expired() -> bool:
        return deadline is not None and time.monotonic() - start >= deadline

    best: RestartResult | None = None
    restarts_run = 0
    restarts_failed = 0
    timed_out = False

    def consider(result: RestartResult | None) -> None:
        nonlocal best, restarts_run, restarts_failed
        restarts_run += 1
        if result is None:
            restarts_failed += 1
            return
        if _is_better(result, best):
            best = result
            logger.info("  New best: restart %d, score %d (delta %d, imbalance %d)",
                        result.restart_index, result.score,
                        result.total_delta, result.imbalance)

    def report() -> None:
        if progress_callback:
            progress_callback(restarts_run, config.restart_count,
                              best.score if best else None)

    if max_workers is None or max_workers <= 1:
        for restart in range(config.restart_count):
            if restart > 0 and expired():
                timed_out = True
                break
            consider(_run_seeded_restart(n, target_sizes, round_count, config,
                                         seed_seqs[restart], restart))
            report()
    else:
        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for wave_start in range(0, config.restart_count, max_workers):
                if wave_start > 0 and expired():
                    timed_out = True
                    break
                wave = range(wave_start, min(wave_start + max_workers, config.restart_count))
                futures = [
                    executor.submit(_run_seeded_restart, n, target_sizes, round_count,
                                    config, seed_seqs[restart], restart)
                    for restart in wave
                ]
                for future in futures:
                    consider(future.result())
                report()

    if timed_out:
        logger.warning("Deadline of %.2fs reached after %d of %d restarts",
                       deadline, restarts_run, config.restart_count)

    if best is None:
        raise NoFeasibleScheduleError(
            f"No feasible schedule after {restarts_run} restarts"
        )

    logger.info("Done. Best score %d from restart %d (%d run, %d failed)",
                best.score, best.restart_index, restarts_run, restarts_failed)

    schedule = Schedule(rounds=[
        [[people[i] for i in group] for group in round_groups]
        for round_groups in best.rounds
    ])
    return ScheduleResult(
        schedule=schedule,
        score=best.score,
        restarts_run=restarts_run,
        restarts_failed=restarts_failed,
        best_restart=best.restart_index,
        timed_out=timed_out,
    )


def schedule_groups(
    participants: Sequence[Participant],
    group_size: int,
    round_count: int,
    config: SearchConfig | None = None,
    **kwargs,
) -> Schedule:
    """Shortcut for search_schedule(...).schedule."""
    return search_schedule(participants, group_size, round_count, config, **kwargs).schedule
