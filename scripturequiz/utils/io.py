from __future__ import annotations

import json
import random
from collections.abc import Iterator
from pathlib import Path
from typing import Any, Union

import numpy as np
import yaml

RngLike = Union[int, random.Random, np.random.Generator, None]


def read_jsonl(path: str | Path) -> Iterator[dict]:
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            yield json.loads(line)


def read_json(path: str | Path) -> Any:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def read_yaml(path: str | Path) -> Any:
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f)


def sample_indices(pool_size: int, n: int, rng: RngLike = None) -> list[int]:
    """Draw ``n`` distinct indices from ``range(pool_size)``.

    ``rng`` may be an int seed, a ``random.Random``, a NumPy ``Generator`` or
    None, which draws from the global ``random`` state. Seeds and seeded
    generators always give the same indices in the same order.
    """
    if rng is None:
        return random.sample(range(pool_size), n)
    if isinstance(rng, np.random.Generator):
        return [int(i) for i in rng.choice(pool_size, size=n, replace=False)]
    if not isinstance(rng, random.Random):
        rng = random.Random(rng)
    return rng.sample(range(pool_size), n)

