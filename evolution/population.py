"""Generational population driven by roulette-wheel reproduction."""

from __future__ import annotations

import logging
import random
from typing import Generic, Sequence, TypeVar

from agents.base import Agent
from agents.genome import Genome
from evolution.probability import NormalizedProbability, probabilities
from evolution.selection import select_parent

LOGGER = logging.getLogger(__name__)

A = TypeVar("A", bound=Agent)


class PopulationSizeMismatchError(ValueError):
    """Raised when the score count does not match the population size."""


class Population(Generic[A]):
    """Owns one generation of agents and advances it in place.

    Reproduction never adds or removes agents: each agent keeps its identity
    and only has its genome replaced by an offspring bred from the previous
    generation.
    """

    def __init__(self, individuals: Sequence[A]) -> None:
        self._individuals: list[A] = list(individuals)
        self._generations = 0
        # Scratch buffers, cleared and refilled on every reproduce call.
        self.probabilities: list[NormalizedProbability] = []
        self.dna: list[Genome] = []

    @property
    def individuals(self) -> list[A]:
        return self._individuals

    @property
    def generations(self) -> int:
        """Number of completed reproduction cycles."""
        return self._generations

    def reproduce(
        self,
        scores: Sequence[float],
        rate: float,
        rng: random.Random | None = None,
    ) -> None:
        """Replace every agent's genome with an offspring of the current generation.

        Args:
            scores (Sequence[float]): Non-negative fitness scores aligned by
                index with ``individuals`` and summing to a positive value.
            rate (float): Mutation probability in [0, 1] handed to each
                offspring genome.
            rng (random.Random | None): Source of randomness. A fresh
                unseeded generator local to this call is used when omitted.

        Raises:
            PopulationSizeMismatchError: If ``len(scores)`` differs from the
                population size.
            InvalidProbabilityError: If ``rate`` or the normalized scores fall
                outside [0, 1].

        Invariants:
            - Population size is unchanged.
            - Offspring are bred only from the pre-cycle agents; no genome is
              replaced until all offspring exist.
            - ``dna[i]`` is applied to ``individuals[i]``.
            - ``generations`` increases by exactly one on success.
        """
        if len(scores) != len(self._individuals):
            raise PopulationSizeMismatchError(
                f"Expected {len(self._individuals)} scores, got {len(scores)}."
            )
        mutation_rate = NormalizedProbability(rate)
        local_rng = rng or random.Random()

        self.probabilities.clear()
        self.probabilities.extend(probabilities(scores))

        self.dna.clear()
        for _ in range(len(self._individuals)):
            parent_a = self._individuals[select_parent(self.probabilities, local_rng)]
            parent_b = self._individuals[select_parent(self.probabilities, local_rng)]
            offspring = parent_a.crossover(parent_b, local_rng)
            offspring.mutate(mutation_rate, local_rng)
            self.dna.append(offspring)

        for individual, offspring in zip(self._individuals, self.dna):
            individual.override_dna(offspring)

        self._generations += 1
        LOGGER.debug(
            "Generation %d bred %d offspring (mutation_rate=%.3f)",
            self._generations,
            len(self.dna),
            mutation_rate,
        )
