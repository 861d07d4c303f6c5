# runtime/rng.py
from zlib import crc32

import numpy as np


def graph_rng(seed: int, tag: str, trial: int = 0) -> np.random.Generator:
    """
    Generator for one random graph. Depends only on (seed, tag, trial), so a
    trial can be regenerated alone and independently of the others.
    """
    if trial < 0:
        raise ValueError(f"trial must be >= 0, got {trial}")
    ss = np.random.SeedSequence([seed & 0xFFFFFFFF, crc32(tag.encode("utf-8")), trial])
    return np.random.Generator(np.random.PCG64(ss))
