"""Agent interface definitions."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

from agents.genome import Genome


class Agent(ABC):
    """Candidate solution owning a genome.

    Agents know how to combine their genetic material with another agent and
    how to adopt a new genome, but remain decoupled from selection and
    population-level reproduction logic.
    """

    @abstractmethod
    def crossover(self, other: "Agent", rng: random.Random) -> Genome:
        """Combine this agent's genome with ``other``'s into an offspring.

        Args:
            other (Agent): The second parent. May be ``self``.
            rng (random.Random): Source of randomness for gene picking.

        Returns:
            Genome: A newly created offspring genome.

        Invariants:
            - Must not mutate either parent.
            - Returned genome must not alias either parent's genome.
        """

    @abstractmethod
    def override_dna(self, genome: Genome) -> None:
        """Replace the agent's genome in place.

        Args:
            genome (Genome): Offspring genome to adopt.

        Invariants:
            - Agent identity persists; only its genetic material changes.
        """
