from __future__ import annotations
import dataclasses
import importlib
import inspect
import logging
from pathlib import Path
from typing import Callable, Dict

import pandas as pd

from imagine_gen.core.config import DatasetConfig, FieldConfig, TableConfig
from imagine_gen.core.errors import ConfigError
from imagine_gen.core.rng import RNG

logger = logging.getLogger(__name__)

GENERATOR_MODULES = {
    "number": "imagine_gen.generators.number",
    "boolean": "imagine_gen.generators.boolean",
    "text": "imagine_gen.generators.text",
    "ids": "imagine_gen.generators.ids",
    "color": "imagine_gen.generators.color",
    "person": "imagine_gen.generators.person",
    "internet": "imagine_gen.generators.internet",
    "game": "imagine_gen.generators.game",
    "dates": "imagine_gen.generators.dates",
    "location": "imagine_gen.generators.location",
    "images": "imagine_gen.images.svg",
}


def resolve_generator(name: str) -> Callable:
    """Look up 'module.function', e.g. 'person.full_name'."""
    module_key, _, func_name = name.partition(".")
    if module_key not in GENERATOR_MODULES or not func_name or func_name.startswith("_"):
        raise ConfigError(f"unknown generator {name!r}")
    module = importlib.import_module(GENERATOR_MODULES[module_key])
    fn = getattr(module, func_name, None)
    if not callable(fn) or isinstance(fn, type):
        raise ConfigError(f"unknown generator {name!r}")
    return fn


def _plain(value):
    # structured results (RGB, Coordinates, ...) become dicts so every writer accepts them
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    return value


def accepts_seed(fn: Callable) -> bool:
    return "seed" in inspect.signature(fn).parameters


def _field_value(fc: FieldConfig, fn, field_seed: float):
    if fn is None:
        return fc.value
    kwargs = dict(fc.kwargs)
    if accepts_seed(fn):
        # an explicit seed in the config pins the column to one value
        kwargs.setdefault("seed", field_seed)
    return _plain(fn(*fc.args, **kwargs))


def build_table(rng: RNG, table: TableConfig) -> pd.DataFrame:
    """One child stream per row, one child seed per field within the row."""
    fns: Dict[str, Callable] = {
        col: resolve_generator(fc.generator) if fc.generator else None
        for col, fc in table.fields.items()
    }
    rows = []
    for _ in range(table.rows):
        row_rng = rng.child()
        rows.append({col: _field_value(fc, fns[col], row_rng.child_seed()) for col, fc in table.fields.items()})
    return pd.DataFrame(rows, columns=list(table.fields.keys()))


def build_dataset(cfg: DatasetConfig) -> Dict[str, pd.DataFrame]:
    root = RNG(cfg.seed)
    out = {}
    for table in cfg.tables:
        out[table.name] = build_table(root.child(), table)
        logger.debug("Built table %s: %d rows", table.name, len(out[table.name]))
    return out


def table_filename(name: str, fmt: str) -> str:
    return f"{name}.{fmt}"


def write_table(df: pd.DataFrame, out_dir: Path, name: str, fmt: str) -> Path:
    path = Path(out_dir) / table_filename(name, fmt)
    if fmt == "parquet":
        df.to_parquet(path, index=False)
    elif fmt == "csv":
        df.to_csv(path, index=False)
    else:
        df.to_json(path, orient="records", lines=True, force_ascii=False)
    logger.debug("Wrote %s (%d rows)", path, len(df))
    return path
