"""Final score of a candidate schedule. Lower is better."""

# Placement cost must always outrank the imbalance tie-breaker.
SCORE_SCALE = 1000


def score(total_delta: int, imbalance: int) -> int:
    return total_delta * SCORE_SCALE + imbalance
