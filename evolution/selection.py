"""Roulette-wheel parent selection."""

from __future__ import annotations

import random
from typing import Sequence


def select_parent(probabilities: Sequence[float], rng: random.Random) -> int:
    """Sample one index with probability proportional to its weight.

    A uniform dart in [0, 1) is thrown and the cumulative weights are walked
    until the first one exceeding it. Rounding may leave the final cumulative
    sum just below the dart; the last index is returned in that case.
    """
    if len(probabilities) == 0:
        raise ValueError("Cannot select a parent from an empty distribution.")

    dart = rng.random()
    cumulative = 0.0
    for index, probability in enumerate(probabilities):
        cumulative += probability
        if dart < cumulative:
            return index
    return len(probabilities) - 1
