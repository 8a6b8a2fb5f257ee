from __future__ import annotations
import logging
from contextlib import contextmanager
from typing import Iterator

from imagine_gen.core.rng import RNG, Seed

logger = logging.getLogger(__name__)

# Stable across releases: callers may depend on the default global sequence.
DEFAULT_GLOBAL_SEED = 0x12345678


class SeedRegistry:
    """Holds the one ambient stream used by calls that pass no seed."""

    def __init__(self, seed: Seed = DEFAULT_GLOBAL_SEED):
        self._seed = seed
        self._rng = RNG(seed)

    @property
    def seed(self) -> Seed:
        return self._seed

    def reseed(self, value: Seed) -> None:
        rng = RNG(value)
        self._seed = value
        self._rng = rng
        logger.debug("Global stream reseeded: %r -> state 0x%08x", value, rng.state)

    def current(self) -> RNG:
        return self._rng


_registry = SeedRegistry()


def get_registry() -> SeedRegistry:
    return _registry


def seed(value: Seed) -> None:
    """Replace the global stream with a fresh one seeded from `value`."""
    _registry.reseed(value)


def get_global_rng() -> RNG:
    return _registry.current()


@contextmanager
def isolated_registry(seed: Seed = DEFAULT_GLOBAL_SEED) -> Iterator[SeedRegistry]:
    """Run a block against a private registry, restoring the previous one after."""
    global _registry
    previous = _registry
    _registry = SeedRegistry(seed)
    try:
        yield _registry
    finally:
        _registry = previous
