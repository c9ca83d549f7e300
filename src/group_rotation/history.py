"""Pair history for one restart: how often each pair met, and who met recently.

Pairs are stored flat. The pair ``(i, j)`` with ``i < j`` maps to a single
index into a vector of length ``n * (n - 1) / 2``; the matrix view is never
materialised, so symmetry holds by construction.

The recency window is a ring buffer of boolean pair masks, one per recorded
round, most recent first. Alongside it a hit counter keeps, per pair, the
number of masks in the window that contain it, so membership checks do not
have to scan the window.
"""

import logging
from itertools import combinations
from typing import Sequence

import numpy as np

logger = logging.getLogger(__name__)


class PairHistory:
    """Co-occurrence counts and a sliding window of recent pairings."""

    def __init__(self, n: int, window_size: int = 3):
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")
        if window_size < 0:
            raise ValueError(f"window_size must be >= 0, got {window_size}")
        self.n = n
        self.window_size = window_size
        self.pair_total = n * (n - 1) // 2

        # n x n lookup of flat pair indices, -1 on the diagonal
        self._pair_index = np.full((n, n), -1, dtype=np.int64)
        rows, cols = np.triu_indices(n, k=1)
        flat = np.arange(self.pair_total, dtype=np.int64)
        self._pair_index[rows, cols] = flat
        self._pair_index[cols, rows] = flat

        self._counts = np.zeros(self.pair_total, dtype=np.int64)
        self._window = np.zeros((window_size, self.pair_total), dtype=bool)
        self._recent_hits = np.zeros(self.pair_total, dtype=np.int64)
        self._head = 0
        self._window_length = 0
        self._rounds_recorded = 0

    # ------------------------------------------------------------------
    # Indexing
    # ------------------------------------------------------------------

    def pair_index(self, i: int, j: int) -> int:
        """Flat index of the unordered pair ``(i, j)``."""
        if not (0 <= i < self.n and 0 <= j < self.n):
            raise IndexError(f"pair ({i}, {j}) out of range for {self.n} participants")
        if i == j:
            raise ValueError(f"a participant does not pair with itself ({i})")
        return int(self._pair_index[i, j])

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------

    def round_mask(self, round_groups: Sequence[Sequence[int]]) -> np.ndarray:
        """Boolean mask over pair indices of every pair sharing a group."""
        mask = np.zeros(self.pair_total, dtype=bool)
        for group in round_groups:
            for a, b in combinations(group, 2):
                mask[self.pair_index(a, b)] = True
        return mask

    def record_round(self, round_groups: Sequence[Sequence[int]]) -> None:
        """Count every pair of the round once and push it into the window."""
        mask = self.round_mask(round_groups)
        self._counts += mask
        self._rounds_recorded += 1

        if self.window_size == 0:
            return

        if self._window_length == self.window_size:
            # The slot in front of the head holds the oldest round
            oldest = (self._head - 1) % self.window_size
            self._recent_hits -= self._window[oldest]
            logger.debug("Evicting round %d from recency window",
                         self._rounds_recorded - self.window_size)
        else:
            self._window_length += 1

        self._head = (self._head - 1) % self.window_size
        self._window[self._head] = mask
        self._recent_hits += mask

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def history_count(self, i: int, j: int) -> int:
        return int(self._counts[self.pair_index(i, j)])

    def met_recently(self, i: int, j: int) -> bool:
        return bool(self._recent_hits[self.pair_index(i, j)] > 0)

    def placement_cost(self, p: int, mates: Sequence[int],
                       history_weight: int, recent_weight: int) -> int:
        """Cost of putting ``p`` next to ``mates``, summed over the mates."""
        if len(mates) == 0:
            return 0
        idx = self._pair_index[p, np.asarray(mates, dtype=np.int64)]
        history = int(self._counts[idx].sum())
        recent = int(np.count_nonzero(self._recent_hits[idx]))
        return history_weight * history + recent_weight * recent

    def imbalance(self) -> int:
        """Spread between the most and the least frequent pair."""
        if self.pair_total == 0:
            return 0
        return int(self._counts.max() - self._counts.min())

    def recent_masks(self) -> list[np.ndarray]:
        """Masks held in the window, most recent first."""
        return [
            self._window[(self._head + k) % self.window_size]
            for k in range(self._window_length)
        ]

    @property
    def counts(self) -> np.ndarray:
        """Read-only view of the flat pair counts."""
        view = self._counts.view()
        view.flags.writeable = False
        return view

    @property
    def rounds_recorded(self) -> int:
        return self._rounds_recorded

    @property
    def window_length(self) -> int:
        return self._window_length
