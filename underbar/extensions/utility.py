from __future__ import annotations

import numpy as np

from ..collection import as_collection, as_sequence, is_sequence
from ..config import get_settings
from ..types import *

# one generator per configured seed, shared by every shuffle() call without an rng
_default_rng: Dict[Optional[int], np.random.Generator] = {}


def default_rng() -> np.random.Generator:
    """the process-wide generator, seeded from UNDERBAR_SEED when set"""
    seed = get_settings().seed
    if seed not in _default_rng:
        _default_rng[seed] = np.random.default_rng(seed)
    return _default_rng[seed]


def flatten(nested: Sequence[Any]) -> List[Any]:
    """
    every non-sequence leaf of an arbitrarily nested sequence, depth-first and left to right.
    strings, mappings and 0-d numpy arrays are leaves. cyclic input never terminates.
    """
    result = []
    # depth-first via an explicit stack, reversed so the leftmost item pops first
    stack = list(reversed(as_sequence(nested, "flatten").values()))
    while stack:
        item = stack.pop()
        if is_sequence(item):
            stack.extend(reversed(as_sequence(item, "flatten").values()))
        elif isinstance(item, np.ndarray):
            # 0-d array, unwrapped like the elements of larger arrays
            result.append(item.item())
        else:
            result.append(item)
    return result


def shuffle(collection: Any, rng: Optional[np.random.Generator] = None) -> List[Any]:
    """
    a uniformly shuffled copy of the collection's values (fisher-yates).
    pass a numpy generator for reproducible output; otherwise the process-wide
    generator from default_rng() is used, so successive calls continue one random stream.
    """
    shuffled = as_collection(collection, "shuffle").values()
    if rng is None:
        rng = default_rng()

    for i in range(len(shuffled) - 1, 0, -1):
        j = int(rng.integers(0, i, endpoint=True))
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled
