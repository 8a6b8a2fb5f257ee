from __future__ import annotations
import hashlib, json
from pathlib import Path
from datetime import datetime, timezone
from typing import Dict

MANIFEST_NAME = "manifest.json"


def sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(1024*1024), b""):
            h.update(chunk)
    return h.hexdigest()


def write_manifest(out_dir: Path, *, dataset_name: str, dataset_version: str, generator_version: str,
                   config_sha256: str, seed, fmt: str, row_counts: Dict[str, int]) -> Path:
    """Record seed, config hash and a sha256 per written table file."""
    out_dir = Path(out_dir)
    tables = {}
    for rel, rows in sorted(row_counts.items()):
        tables[rel] = {"rows": int(rows), "sha256": sha256_file(out_dir / rel)}
    manifest = {
        "dataset_name": dataset_name,
        "dataset_version": dataset_version,
        "generator_version": generator_version,
        "config_sha256": config_sha256,
        "seed": seed,
        "format": fmt,
        "created_utc": datetime.now(timezone.utc).isoformat().replace("+00:00","Z"),
        "tables": tables,
    }
    path = out_dir / MANIFEST_NAME
    path.write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    return path


def read_manifest(out_dir: Path) -> dict:
    return json.loads((Path(out_dir) / MANIFEST_NAME).read_text(encoding="utf-8"))
