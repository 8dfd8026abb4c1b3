"""Tests for the example evolution run and the CLI."""

from __future__ import annotations

import json
import random

import numpy as np

from cli.main import run_cli
from configs.loader import ExperimentConfig
from evolution.population import Population
from main import build_population, evaluate_fitness, run_experiment


def _config(**overrides) -> ExperimentConfig:
    settings = {"population_size": 8, "generations": 5, "mutation_rate": 0.1, "genes": 3, "seed": 42}
    settings.update(overrides)
    return ExperimentConfig(**settings)


def test_build_population_matches_config() -> None:
    population = build_population(_config(), random.Random(0))

    assert len(population.individuals) == 8
    assert all(len(agent.genome) == 3 for agent in population.individuals)
    assert population.generations == 0


def test_fitness_peaks_at_target() -> None:
    population = build_population(_config(), random.Random(0))
    target = np.array(population.individuals[0].genome.genes)

    fitness = evaluate_fitness(population, target)

    assert fitness.shape == (8,)
    assert fitness[0] == 1.0
    assert np.all((fitness > 0.0) & (fitness <= 1.0))


def test_run_experiment_records_each_generation() -> None:
    history = run_experiment(_config())

    assert [metrics.generation_index for metrics in history] == list(range(5))
    assert all(0.0 < metrics.mean_fitness <= metrics.max_fitness + 1e-12 for metrics in history)
    assert all(metrics.max_fitness <= 1.0 for metrics in history)


def test_run_experiment_is_deterministic() -> None:
    assert run_experiment(_config()) == run_experiment(_config())


def test_run_experiment_early_stop() -> None:
    history = run_experiment(_config(early_stop_max_fitness=0.0))

    assert len(history) == 1


def test_run_experiment_breeds_every_generation_but_the_last(monkeypatch) -> None:
    calls: list[int] = []
    original = Population.reproduce

    def counting_reproduce(self, *args, **kwargs):
        calls.append(self.generations)
        original(self, *args, **kwargs)

    monkeypatch.setattr(Population, "reproduce", counting_reproduce)

    history = run_experiment(_config(generations=4))

    assert len(history) == 4
    assert calls == [0, 1, 2]


def test_run_experiment_with_zero_generations() -> None:
    assert run_experiment(_config(generations=0)) == []


def test_cli_run_prints_summary(tmp_path, capsys) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(
        json.dumps(
            {
                "population_size": 4,
                "generations": 2,
                "mutation_rate": 0.1,
                "genes": 2,
                "seed": 7,
                "target": [0.5, -0.5],
            }
        ),
        encoding="utf-8",
    )

    assert run_cli(["run", "--config", str(config_path)]) == 0

    summary = json.loads(capsys.readouterr().out.strip())
    assert summary["generations_run"] == 2
    assert summary["config"]["seed"] == 7
    assert summary["config"]["target"] == [0.5, -0.5]


def test_cli_batch_prints_one_line_per_experiment(tmp_path, capsys) -> None:
    config_path = tmp_path / "batch.yaml"
    config_path.write_text(
        "- population_size: 4\n"
        "  generations: 1\n"
        "  mutation_rate: 0.0\n"
        "  genes: 2\n"
        "  seed: 1\n"
        "- population_size: 4\n"
        "  generations: 3\n"
        "  mutation_rate: 0.2\n"
        "  genes: 2\n"
        "  seed: 2\n",
        encoding="utf-8",
    )

    assert run_cli(["batch", "--config", str(config_path)]) == 0

    lines = capsys.readouterr().out.strip().splitlines()
    assert [json.loads(line)["generations_run"] for line in lines] == [1, 3]
