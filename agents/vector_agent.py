"""Agent backed by a ``VectorGenome``."""

from __future__ import annotations

import random
from dataclasses import dataclass

from agents.base import Agent
from agents.genome import Genome
from agents.vector_genome import VectorGenome


@dataclass
class VectorAgent(Agent):
    """Agent whose whole behavior is described by a vector of genes."""

    genome: VectorGenome
    agent_id: str = ""

    def crossover(self, other: Agent, rng: random.Random) -> VectorGenome:
        if not isinstance(other, VectorAgent):
            raise TypeError("VectorAgent crossover requires another VectorAgent.")
        return self.genome.crossover(other.genome, rng)

    def override_dna(self, genome: Genome) -> None:
        """Adopt ``genome`` as the active genome."""
        if not isinstance(genome, VectorGenome):
            raise TypeError("VectorAgent requires a VectorGenome.")
        self.genome = genome
