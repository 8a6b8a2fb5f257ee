"""Seeded, reproducible mock data.

Every generator takes an optional keyword-only ``seed``. With a seed the
call runs on its own isolated stream; without one it draws from the global
stream, which `seed` resets.
"""
from __future__ import annotations

__version__ = "1.0.0"

from imagine_gen.core.errors import ConfigError, DanglingEscape, EmptyDomain, ImagineError, InvalidArgument
from imagine_gen.core.rng import RNG, rng_from
from imagine_gen.core.seed import get_global_rng, isolated_registry, seed
from imagine_gen.generators import (
    boolean, color, dates, game, ids, internet, location, number, person, text, util,
)
from imagine_gen.images import svg as images

__all__ = [
    "__version__",
    "seed",
    "get_global_rng",
    "isolated_registry",
    "rng_from",
    "RNG",
    "ImagineError",
    "InvalidArgument",
    "EmptyDomain",
    "DanglingEscape",
    "ConfigError",
    "number",
    "boolean",
    "text",
    "ids",
    "color",
    "person",
    "internet",
    "game",
    "dates",
    "location",
    "util",
    "images",
]
