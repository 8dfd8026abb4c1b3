"""Crossover and mutation for single real-valued genes on the [-1, 1] scale."""

from __future__ import annotations

import random

from evolution.probability import NormalizedProbability

GENE_MIN = -1.0
GENE_MAX = 1.0


def crossover(a: float, b: float, rng: random.Random) -> float:
    """Return ``a`` or ``b`` with equal probability."""
    return a if rng.random() < 0.5 else b


def mutate(value: float, rate: float, rng: random.Random) -> float:
    """Perturb ``value`` with probability ``rate``.

    On a successful trial a standard normal sample is added and the result is
    clamped to ``[GENE_MIN, GENE_MAX]``. Otherwise ``value`` is returned
    untouched, including when it already lies outside that range.
    """
    chance = NormalizedProbability(rate)
    if not rng.random() < chance:
        return value
    perturbed = value + rng.gauss(0.0, 1.0)
    return min(max(perturbed, GENE_MIN), GENE_MAX)
