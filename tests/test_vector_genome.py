"""Tests for the vector genome and agent."""

from __future__ import annotations

import random

import pytest

from agents.vector_agent import VectorAgent
from agents.vector_genome import VectorGenome


def test_random_genome_within_gene_range() -> None:
    genome = VectorGenome.uniform(16, random.Random(0))

    assert len(genome) == 16
    assert all(-1.0 <= gene <= 1.0 for gene in genome.genes)


def test_random_genome_rejects_empty_length() -> None:
    with pytest.raises(ValueError, match="must be > 0"):
        VectorGenome.uniform(0, random.Random(0))


def test_crossover_picks_genes_from_parents_without_mutating_them() -> None:
    parent_a = VectorGenome(genes=[0.1, 0.2, 0.3, 0.4])
    parent_b = VectorGenome(genes=[-0.1, -0.2, -0.3, -0.4])

    child = parent_a.crossover(parent_b, random.Random(3))

    assert parent_a.genes == [0.1, 0.2, 0.3, 0.4]
    assert parent_b.genes == [-0.1, -0.2, -0.3, -0.4]
    for index, gene in enumerate(child.genes):
        assert gene in (parent_a.genes[index], parent_b.genes[index])


def test_crossover_rejects_mismatched_lengths() -> None:
    with pytest.raises(ValueError, match="different lengths"):
        VectorGenome(genes=[0.0]).crossover(VectorGenome(genes=[0.0, 0.0]), random.Random(0))


def test_mutate_in_place_respects_rate() -> None:
    genome = VectorGenome(genes=[0.5, -0.5])
    genome.mutate(0.0, random.Random(0))
    assert genome.genes == [0.5, -0.5]

    genome.mutate(1.0, random.Random(0))
    assert genome.genes != [0.5, -0.5]
    assert all(-1.0 <= gene <= 1.0 for gene in genome.genes)


def test_agent_self_crossover_does_not_alias_parent() -> None:
    agent = VectorAgent(genome=VectorGenome(genes=[0.3, 0.6]), agent_id="agent_0")

    child = agent.crossover(agent, random.Random(1))

    assert child.genes == [0.3, 0.6]
    assert child is not agent.genome
    assert child.genes is not agent.genome.genes


def test_agent_override_dna_keeps_identity() -> None:
    agent = VectorAgent(genome=VectorGenome(genes=[0.0]), agent_id="agent_0")
    new_genome = VectorGenome(genes=[0.7])

    agent.override_dna(new_genome)

    assert agent.genome is new_genome
    assert agent.agent_id == "agent_0"


def test_agent_rejects_foreign_genome() -> None:
    agent = VectorAgent(genome=VectorGenome(genes=[0.0]))

    with pytest.raises(TypeError):
        agent.override_dna(object())  # type: ignore[arg-type]
