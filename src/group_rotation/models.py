"""Core data models for the group rotation scheduler."""

from dataclasses import dataclass, field
from typing import Hashable


Participant = Hashable
Round = list[list[Participant]]


@dataclass(frozen=True)
class SearchConfig:
    """Penalty weights and search effort for the restart search."""
    history_weight: int = 10    # per earlier round a pair already shared
    recent_weight: int = 1000   # per mate met inside the recency window
    skew_weight: int = 2        # per member already sitting in the group
    window_size: int = 3        # rounds that count as "recent"
    restart_count: int = 200

    def __post_init__(self):
        if self.window_size < 0:
            raise ValueError(f"window_size must be >= 0, got {self.window_size}")
        if self.restart_count < 1:
            raise ValueError(f"restart_count must be >= 1, got {self.restart_count}")

    def to_dict(self) -> dict:
        return {
            "history_weight": self.history_weight,
            "recent_weight": self.recent_weight,
            "skew_weight": self.skew_weight,
            "window_size": self.window_size,
            "restart_count": self.restart_count
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SearchConfig":
        return cls(
            history_weight=data.get("history_weight", 10),
            recent_weight=data.get("recent_weight", 1000),
            skew_weight=data.get("skew_weight", 2),
            window_size=data.get("window_size", 3),
            restart_count=data.get("restart_count", 200)
        )


@dataclass(frozen=True)
class ScheduleEntry:
    """One group of one round, numbered from 1, ready to be stored by a caller."""
    round_number: int
    group_number: int
    participant_ids: tuple

    def to_dict(self) -> dict:
        return {
            "round_number": self.round_number,
            "group_number": self.group_number,
            "participant_ids": list(self.participant_ids)
        }


@dataclass
class Schedule:
    """Rounds in order; each round is a list of groups of participants."""
    rounds: list[Round] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rounds)

    def __iter__(self):
        return iter(self.rounds)

    def __getitem__(self, index: int) -> Round:
        return self.rounds[index]

    def entries(self) -> list[ScheduleEntry]:
        """Flatten into one entry per round and group."""
        result = []
        for round_index, round_groups in enumerate(self.rounds):
            for group_index, group in enumerate(round_groups):
                result.append(ScheduleEntry(
                    round_number=round_index + 1,
                    group_number=group_index + 1,
                    participant_ids=tuple(group)
                ))
        return result


@dataclass
class RoundResult:
    """Outcome of building a single round.

    ``groups`` holds participant indices, not caller identifiers. A failed
    round carries no groups and must not be recorded in the history.
    """
    ok: bool
    groups: list[list[int]] = field(default_factory=list)
    delta_score: int = 0

    @classmethod
    def success(cls, groups: list[list[int]], delta_score: int) -> "RoundResult":
        return cls(ok=True, groups=groups, delta_score=delta_score)

    @classmethod
    def failed(cls) -> "RoundResult":
        return cls(ok=False)


@dataclass
class RestartResult:
    """A complete candidate schedule (as indices) produced by one restart."""
    restart_index: int
    rounds: list[list[list[int]]]
    total_delta: int
    imbalance: int
    score: int


@dataclass
class ScheduleResult:
    """Result of the restart search."""
    schedule: Schedule
    score: int
    restarts_run: int
    restarts_failed: int
    best_restart: int
    timed_out: bool = False
