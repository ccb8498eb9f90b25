from __future__ import annotations

import random
from typing import Optional

# Entropy-seeded; shared by every generator that is not handed its own source.
_PROCESS_RNG = random.Random()


def default_rng() -> random.Random:
    """Return the process-wide random source used when none is injected."""
    return _PROCESS_RNG


def make_rng(seed: Optional[int] = None) -> random.Random:
    """
    Build a random source for the generators.

    With a seed the source is private and reproducible (tests, CLI `--seed`).
    Without one the shared process source is returned, so every call keeps
    drawing fresh values.
    """
    if seed is None:
        return default_rng()
    return random.Random(seed)
