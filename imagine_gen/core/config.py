from __future__ import annotations
import hashlib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from imagine_gen.core.errors import ConfigError

FORMATS = ("parquet", "csv", "jsonl")


def sha256_text(s: str) -> str:
    return hashlib.sha256(s.encode("utf-8")).hexdigest()


@dataclass(frozen=True)
class FieldConfig:
    generator: str = ""
    args: Tuple[Any, ...] = ()
    kwargs: Dict[str, Any] = field(default_factory=dict)
    value: Any = None  # literal, used when generator is empty


@dataclass(frozen=True)
class TableConfig:
    name: str
    rows: int
    fields: Dict[str, FieldConfig]


@dataclass(frozen=True)
class DatasetConfig:
    seed: Any
    dataset_name: str
    dataset_version: str
    format: str
    tables: List[TableConfig]
    config_sha256: str


def _field(table: str, col: str, raw) -> FieldConfig:
    if isinstance(raw, str):
        return FieldConfig(generator=raw)
    if isinstance(raw, dict):
        if "generator" in raw:
            args = raw.get("args", [])
            kwargs = raw.get("kwargs", {})
            if not isinstance(args, list) or not isinstance(kwargs, dict):
                raise ConfigError(f"{table}.{col}: args must be a list and kwargs a mapping")
            return FieldConfig(generator=str(raw["generator"]), args=tuple(args), kwargs=dict(kwargs))
        if "value" in raw:
            return FieldConfig(value=raw["value"])
    raise ConfigError(f"{table}.{col}: expected 'module.function', {{generator: ...}} or {{value: ...}}")


def parse_config(cfg: dict, config_sha256: str = "") -> DatasetConfig:
    if not isinstance(cfg, dict):
        raise ConfigError("config root must be a mapping")
    seed = cfg.get("seed", 1337)
    if not isinstance(seed, (int, str)) or isinstance(seed, bool):
        raise ConfigError("seed must be an integer or a string")
    fmt = str(cfg.get("format", "parquet"))
    if fmt not in FORMATS:
        raise ConfigError(f"format must be one of {', '.join(FORMATS)}; got {fmt!r}")
    raw_tables = cfg.get("tables") or {}
    if not isinstance(raw_tables, dict) or not raw_tables:
        raise ConfigError("config needs at least one table under 'tables'")

    tables = []
    for name, t in raw_tables.items():
        if not isinstance(t, dict) or not isinstance(t.get("fields"), dict) or not t["fields"]:
            raise ConfigError(f"table {name!r} needs a non-empty 'fields' mapping")
        rows = t.get("rows", 10)
        if not isinstance(rows, int) or isinstance(rows, bool) or rows < 0:
            raise ConfigError(f"table {name!r}: rows must be a non-negative integer")
        fields = {str(col): _field(name, col, raw) for col, raw in t["fields"].items()}
        tables.append(TableConfig(name=str(name), rows=rows, fields=fields))

    return DatasetConfig(
        seed=seed,
        dataset_name=str(cfg.get("dataset_name", "imagine")),
        dataset_version=str(cfg.get("dataset_version", "1.0")),
        format=fmt,
        tables=tables,
        config_sha256=config_sha256,
    )


def load_config(path: Path) -> DatasetConfig:
    text = Path(path).read_text(encoding="utf-8")
    try:
        cfg = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"{path}: not valid YAML: {e}") from e
    return parse_config(cfg, sha256_text(text))
