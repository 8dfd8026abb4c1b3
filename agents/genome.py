"""Genome contract for evolutionary operators."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod


class Genome(ABC):
    """Mutable genetic payload carried by an agent.

    The population never inspects a genome's contents; it only asks for an
    in-place mutation after crossover has produced a fresh offspring.
    """

    @abstractmethod
    def mutate(self, rate: float, rng: random.Random) -> None:
        """Perturb this genome in place.

        Args:
            rate (float): Probability in [0, 1] that each mutable element is
                perturbed.
            rng (random.Random): Source of randomness for the perturbation.

        Invariants:
            - ``rate == 0`` must leave the genome unchanged.
            - Behavior should be deterministic given equivalent RNG state.
        """
