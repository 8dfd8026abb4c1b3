"""Fixed-length genome of real-valued genes on the [-1, 1] scale."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from agents.genome import Genome
from evolution import operators


@dataclass
class VectorGenome(Genome):
    """Genome holding one float per gene.

    Crossover and mutation work gene by gene through the scalar operators in
    ``evolution.operators``, so genes are expected to stay within [-1, 1].
    """

    genes: list[float] = field(default_factory=list)

    @classmethod
    def uniform(cls, length: int, rng: random.Random) -> "VectorGenome":
        """Create a genome with ``length`` uniform genes in [-1, 1]."""
        if length <= 0:
            raise ValueError("Genome length must be > 0.")
        return cls(genes=[rng.uniform(operators.GENE_MIN, operators.GENE_MAX) for _ in range(length)])

    def __len__(self) -> int:
        return len(self.genes)

    def crossover(self, other: Genome, rng: random.Random) -> "VectorGenome":
        """Create offspring by picking each gene from either parent."""
        if not isinstance(other, VectorGenome):
            raise TypeError("VectorGenome crossover requires another VectorGenome.")
        if len(other.genes) != len(self.genes):
            raise ValueError(
                f"Cannot cross genomes of different lengths ({len(self.genes)} != {len(other.genes)})."
            )
        return VectorGenome(genes=[operators.crossover(a, b, rng) for a, b in zip(self.genes, other.genes)])

    def mutate(self, rate: float, rng: random.Random) -> None:
        self.genes = [operators.mutate(gene, rate, rng) for gene in self.genes]
