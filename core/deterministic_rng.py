"""Deterministic RNG container for reproducible evolution runs."""

from __future__ import annotations

import hashlib
import random
from dataclasses import dataclass

import numpy as np


@dataclass
class DeterministicRNG:
    """Owns seeded RNG streams without touching global random state."""

    seed: int

    def __post_init__(self) -> None:
        self.numpy_rng = np.random.default_rng(self.seed)
        self._streams: dict[str, random.Random] = {}

    def stream(self, name: str) -> random.Random:
        """Return independent deterministic stream by name."""
        if name not in self._streams:
            # Stable across processes, unlike the built-in hash().
            digest = hashlib.sha256(f"{self.seed}:{name}".encode("utf-8")).digest()
            derived_seed = int.from_bytes(digest[:8], byteorder="big", signed=False) & 0xFFFFFFFF
            self._streams[name] = random.Random(derived_seed)
        return self._streams[name]
