"""Experiment settings read from YAML or JSON files."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml


class ConfigValidationError(ValueError):
    """Raised when an experiment config fails validation."""


_REQUIRED_KEYS: tuple[str, ...] = (
    "population_size",
    "generations",
    "mutation_rate",
    "genes",
    "seed",
)
_OPTIONAL_KEYS: tuple[str, ...] = ("target", "early_stop_max_fitness")


@dataclass(frozen=True)
class ExperimentConfig:
    """Settings for one evolution run.

    ``target`` is the gene vector agents are scored against; when omitted the
    run samples one from its seed. Unrecognized keys are kept in ``extras`` so
    batch files can carry labels and notes.
    """

    population_size: int
    generations: int
    mutation_rate: float
    genes: int
    seed: int
    target: tuple[float, ...] | None = None
    early_stop_max_fitness: float | None = None
    extras: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, payload: Any) -> "ExperimentConfig":
        """Validate a raw mapping and build a config from it."""
        if not isinstance(payload, Mapping):
            raise ConfigValidationError("Each experiment config must be a mapping.")

        missing = [key for key in _REQUIRED_KEYS if key not in payload]
        if missing:
            raise ConfigValidationError(f"Missing required config keys: {', '.join(missing)}")

        try:
            config = cls(
                population_size=int(payload["population_size"]),
                generations=int(payload["generations"]),
                mutation_rate=float(payload["mutation_rate"]),
                genes=int(payload["genes"]),
                seed=int(payload["seed"]),
                target=_parse_target(payload.get("target")),
                early_stop_max_fitness=_optional_float(payload.get("early_stop_max_fitness")),
                extras={k: v for k, v in payload.items() if k not in _REQUIRED_KEYS + _OPTIONAL_KEYS},
            )
        except (TypeError, ValueError) as exc:
            raise ConfigValidationError(f"Invalid config value: {exc}") from exc

        config.validate()
        return config

    def validate(self) -> None:
        if self.population_size <= 0:
            raise ConfigValidationError("population_size must be > 0")
        if self.generations < 0:
            raise ConfigValidationError("generations must be >= 0")
        if not 0.0 <= self.mutation_rate <= 1.0:
            raise ConfigValidationError("mutation_rate must be in [0.0, 1.0]")
        if self.genes <= 0:
            raise ConfigValidationError("genes must be > 0")
        if self.target is not None and len(self.target) != self.genes:
            raise ConfigValidationError(f"target must hold {self.genes} genes, got {len(self.target)}")

    def to_dict(self) -> dict[str, Any]:
        """Flatten into a JSON-compatible mapping, extras included."""
        payload = asdict(self)
        extras = payload.pop("extras")
        if payload["target"] is not None:
            payload["target"] = list(payload["target"])
        payload.update(extras)
        return payload


def _parse_target(raw: Any) -> tuple[float, ...] | None:
    if raw is None:
        return None
    if not isinstance(raw, list):
        raise ConfigValidationError("target must be a list of numbers")
    return tuple(float(value) for value in raw)


def _optional_float(raw: Any) -> float | None:
    return None if raw is None else float(raw)


class ConfigLoader:
    """Read experiment configs from ``.json``, ``.yaml`` or ``.yml`` files."""

    @staticmethod
    def load(path: str | Path) -> ExperimentConfig:
        payload = _read_config_payload(path)
        if not isinstance(payload, Mapping):
            raise ConfigValidationError("Single config file must contain a mapping object.")
        return ExperimentConfig.from_mapping(payload)

    @staticmethod
    def load_many(path: str | Path) -> list[ExperimentConfig]:
        """Load a batch of configs.

        The file may hold a single mapping, a list of mappings, or a mapping
        whose ``experiments`` key lists them.
        """
        payload = _read_config_payload(path)
        if isinstance(payload, Mapping):
            if "experiments" not in payload:
                return [ExperimentConfig.from_mapping(payload)]
            payload = payload["experiments"]
        if not isinstance(payload, list):
            raise ConfigValidationError("'experiments' must be a list of mappings.")
        return [ExperimentConfig.from_mapping(item) for item in payload]


def _read_config_payload(path: str | Path) -> Any:
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigValidationError(f"Config file not found: {config_path}")

    suffix = config_path.suffix.lower()
    if suffix not in {".json", ".yaml", ".yml"}:
        raise ConfigValidationError(f"Unsupported config extension: {suffix}")

    content = config_path.read_text(encoding="utf-8")
    try:
        if suffix == ".json":
            return json.loads(content)
        return yaml.safe_load(content)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigValidationError(f"Failed to parse config '{config_path}': {exc}") from exc
