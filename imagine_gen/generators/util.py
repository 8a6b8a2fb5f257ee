from __future__ import annotations
import inspect
import math
from typing import Any, Callable, Dict, List, Mapping, Optional, TypeVar

import pandas as pd

from imagine_gen.core.rng import RNG, Seed, rng_from
from imagine_gen.core.seed import get_global_rng, isolated_registry

T = TypeVar("T")


def _wants_context(fn: Callable) -> bool:
    # one-arg callables get the partially built record
    try:
        params = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        return False
    positional = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    return any(p.kind in positional and p.default is inspect.Parameter.empty for p in params)


def _call_scoped(rng: RNG, fn: Callable, *args):
    # unseeded generators inside fn draw from a child of the caller's stream
    with isolated_registry(rng.child_seed()):
        return fn(*args)


def array(length: int, factory: Callable[[], T], *, seed: Optional[Seed] = None) -> List[T]:
    """Call `factory` `length` times (floored, minimum 0).

    Each call runs with the global stream replaced by a child of this call's
    stream, so a local seed replays the whole array whatever the global seed.
    The outer stream advances once per element.
    """
    rng = rng_from(seed, get_global_rng())
    return [_call_scoped(rng, factory) for _ in range(max(0, math.floor(length)))]


def object(schema: Mapping[str, Any], *, seed: Optional[Seed] = None) -> Dict[str, Any]:
    """Build a record from literals, ``() -> v`` and ``(ctx) -> v`` fields, in order."""
    rng = rng_from(seed, get_global_rng())
    result: Dict[str, Any] = {}
    for key, gen in schema.items():
        if callable(gen):
            result[key] = _call_scoped(rng, gen, result) if _wants_context(gen) else _call_scoped(rng, gen)
        else:
            result[key] = gen
            rng.next()
    return result


def object_many(n: int, schema: Mapping[str, Any], *, seed: Optional[Seed] = None) -> List[Dict[str, Any]]:
    rng = rng_from(seed, get_global_rng())
    return [object(schema, seed=rng.child_seed()) for _ in range(max(0, math.floor(n)))]


def auto(structure: Any, *, seed: Optional[Seed] = None) -> Any:
    """Resolve a nested structure: lists/tuples and dicts element-wise, callables invoked."""
    rng = rng_from(seed, get_global_rng())
    if isinstance(structure, (list, tuple)):
        items = [auto(item, seed=rng.child_seed()) for item in structure]
        return items if isinstance(structure, list) else tuple(items)
    if isinstance(structure, Mapping):
        return {k: auto(v, seed=rng.child_seed()) for k, v in structure.items()}
    if callable(structure):
        return _call_scoped(rng, structure)
    return structure


def frame(n: int, schema: Mapping[str, Any], *, seed: Optional[Seed] = None) -> pd.DataFrame:
    """`object_many` rows as a DataFrame, columns in schema order."""
    rows = object_many(n, schema, seed=seed)
    return pd.DataFrame(rows, columns=list(schema.keys()))
