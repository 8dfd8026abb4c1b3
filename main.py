"""Example evolution run: vector agents converging on a target."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

import numpy as np

from agents.vector_agent import VectorAgent
from agents.vector_genome import VectorGenome
from configs.loader import ConfigLoader, ExperimentConfig
from core.deterministic_rng import DeterministicRNG
from evolution.population import Population

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationMetrics:
    """Structured per-generation metrics payload."""

    generation_index: int
    mean_fitness: float = 0.0
    max_fitness: float = 0.0
    diversity: float = 0.0


def build_population(config: ExperimentConfig, rng: random.Random) -> Population[VectorAgent]:
    """Create a population of agents with uniformly random genomes."""
    agents = [
        VectorAgent(genome=VectorGenome.uniform(config.genes, rng), agent_id=f"agent_{index}")
        for index in range(config.population_size)
    ]
    return Population(agents)


def gene_matrix(population: Population[VectorAgent]) -> np.ndarray:
    return np.array([agent.genome.genes for agent in population.individuals], dtype=float)


def evaluate_fitness(population: Population[VectorAgent], target: np.ndarray) -> np.ndarray:
    """Score each agent by closeness to ``target``.

    Fitness is ``1 / (1 + distance)``, which lies in (0, 1] and therefore
    always yields a valid selection distribution.
    """
    distances = np.linalg.norm(gene_matrix(population) - target, axis=1)
    return 1.0 / (1.0 + distances)


def _resolve_target(config: ExperimentConfig, rng: DeterministicRNG) -> np.ndarray:
    if config.target is None:
        return rng.numpy_rng.uniform(-1.0, 1.0, size=config.genes)
    return np.asarray(config.target, dtype=float)


def run_experiment(config: ExperimentConfig) -> list[GenerationMetrics]:
    """Evolve a population for ``config.generations`` cycles.

    Every generation is scored and recorded; the last one is not bred.
    Stops early once the best fitness reaches ``early_stop_max_fitness``.
    """
    rng = DeterministicRNG(config.seed)
    target = _resolve_target(config, rng)
    population = build_population(config, rng.stream("population"))
    reproduction_rng = rng.stream("reproduction")

    early_stop_threshold = config.early_stop_max_fitness
    history: list[GenerationMetrics] = []
    for generation_index in range(config.generations):
        fitness = evaluate_fitness(population, target)
        metrics = GenerationMetrics(
            generation_index=generation_index,
            mean_fitness=float(np.mean(fitness)),
            max_fitness=float(np.max(fitness)),
            diversity=float(np.mean(np.std(gene_matrix(population), axis=0))),
        )
        history.append(metrics)
        LOGGER.info(
            "generation=%d mean_fitness=%.4f max_fitness=%.4f diversity=%.4f",
            metrics.generation_index,
            metrics.mean_fitness,
            metrics.max_fitness,
            metrics.diversity,
        )

        if early_stop_threshold is not None and metrics.max_fitness >= early_stop_threshold:
            LOGGER.info("Early stop at generation %d (max_fitness=%.4f)", generation_index, metrics.max_fitness)
            break

        # Last generation is scored only.
        if generation_index + 1 < config.generations:
            population.reproduce(fitness.tolist(), config.mutation_rate, rng=reproduction_rng)

    return history


def main(config_path: str = "configs/example_experiment.yaml") -> None:
    """Load config and run one experiment."""
    logging.basicConfig(level=logging.INFO)
    run_experiment(ConfigLoader.load(config_path))


if __name__ == "__main__":
    main()
