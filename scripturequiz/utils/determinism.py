from __future__ import annotations

import logging
import os
import random

import numpy as np

logger = logging.getLogger(__name__)


def set_determinism(seed: int = 42, python_hash_seed: int = 0) -> None:
    """Apply determinism controls across Python/NumPy.

    - Sets PYTHONHASHSEED for child processes
    - Seeds Python `random` and the legacy NumPy global RNG

    Sampling calls that receive an explicit seed or generator do not depend
    on this; it only pins calls made with ``rng=None``.
    """
    os.environ["PYTHONHASHSEED"] = str(python_hash_seed)
    random.seed(seed)
    np.random.seed(seed)
    logger.debug("Determinism set: seed=%d", seed)
