from __future__ import annotations
from pathlib import Path
import json

from imagine_gen.core.manifest import MANIFEST_NAME, read_manifest, sha256_file


def validate_dataset(out_dir: Path) -> dict:
    """Check a generated dataset against its manifest.

    Every table listed in the manifest must exist and hash to the recorded
    sha256.
    """
    out_dir = Path(out_dir)
    if not (out_dir / MANIFEST_NAME).exists():
        return {"ok": False, "missing_files": [MANIFEST_NAME], "checks": {}}
    try:
        manifest = read_manifest(out_dir)
    except json.JSONDecodeError as e:
        return {"ok": False, "missing_files": [], "checks": {MANIFEST_NAME: {"error": str(e)}}}

    tables = manifest.get("tables", {})
    missing = [f for f in tables if not (out_dir / f).exists()]
    report = {"ok": len(missing)==0, "missing_files": missing, "checks": {}}

    for rel, meta in tables.items():
        if rel in missing:
            continue
        actual = sha256_file(out_dir / rel)
        ok = actual == meta.get("sha256")
        report["checks"][rel] = {"sha256_ok": ok, "rows": meta.get("rows")}
        report["ok"] = report["ok"] and ok

    return report
