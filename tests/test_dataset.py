import json

import pandas as pd
import pytest
import yaml

from imagine_gen.cli import cmd_sample
from imagine_gen.core.config import load_config, parse_config
from imagine_gen.core.errors import ConfigError
from imagine_gen.core.manifest import write_manifest
from imagine_gen.core.validation import validate_dataset
from imagine_gen.dataset.tables import build_dataset, resolve_generator, write_table

CFG = {
    "seed": 11,
    "format": "csv",
    "tables": {
        "things": {
            "rows": 5,
            "fields": {
                "id": "ids.uuid",
                "n": {"generator": "number.integer", "args": [1, 3]},
                "rgb": "color.rgb",
                "kind": {"value": "thing"},
                "img": {"generator": "images.placeholder", "args": [4, 4]},
            },
        }
    },
}


def test_parse_config_defaults():
    cfg = parse_config({"tables": {"t": {"fields": {"a": "text.word"}}}})
    assert cfg.seed == 1337
    assert cfg.format == "parquet"
    assert cfg.tables[0].rows == 10


@pytest.mark.parametrize("raw", [
    [],
    {"tables": {}},
    {"format": "xml", "tables": {"t": {"fields": {"a": "text.word"}}}},
    {"seed": 1.5, "tables": {"t": {"fields": {"a": "text.word"}}}},
    {"tables": {"t": {"rows": -1, "fields": {"a": "text.word"}}}},
    {"tables": {"t": {"fields": {"a": 3}}}},
])
def test_bad_configs(raw):
    with pytest.raises(ConfigError):
        parse_config(raw)


@pytest.mark.parametrize("name", ["nope.x", "person", "person._nothing", "person.missing", "color.RGB"])
def test_unknown_generator(name):
    with pytest.raises(ConfigError):
        resolve_generator(name)


def test_build_dataset_is_reproducible():
    a = build_dataset(parse_config(CFG))["things"]
    b = build_dataset(parse_config(CFG))["things"]
    pd.testing.assert_frame_equal(a, b)
    assert set(a["n"]) <= {1, 2, 3}
    assert (a["kind"] == "thing").all()
    assert set(a["rgb"].iloc[0]) == {"r", "g", "b"}


def test_different_seed_changes_data():
    other = dict(CFG, seed="other")
    a = build_dataset(parse_config(CFG))["things"]
    b = build_dataset(parse_config(other))["things"]
    assert a["id"].tolist() != b["id"].tolist()


def test_load_config_hashes_text(tmp_path):
    p = tmp_path / "c.yaml"
    p.write_text(yaml.safe_dump(CFG), encoding="utf-8")
    cfg = load_config(p)
    assert len(cfg.config_sha256) == 64


def test_load_config_bad_yaml(tmp_path):
    p = tmp_path / "c.yaml"
    p.write_text("tables: [unclosed", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(p)


def test_manifest_and_validation(tmp_path):
    cfg = parse_config(CFG)
    tables = build_dataset(cfg)
    write_table(tables["things"], tmp_path, "things", "csv")
    write_manifest(tmp_path, dataset_name="x", dataset_version="1", generator_version="g",
                   config_sha256="c", seed=cfg.seed, fmt="csv", row_counts={"things.csv": 5})
    manifest = json.loads((tmp_path / "manifest.json").read_text(encoding="utf-8"))
    assert manifest["tables"]["things.csv"]["rows"] == 5
    assert validate_dataset(tmp_path)["ok"]

    (tmp_path / "things.csv").write_text("tampered", encoding="utf-8")
    rep = validate_dataset(tmp_path)
    assert not rep["ok"]
    assert rep["checks"]["things.csv"]["sha256_ok"] is False

    (tmp_path / "things.csv").unlink()
    assert validate_dataset(tmp_path)["missing_files"] == ["things.csv"]


def test_validation_without_manifest(tmp_path):
    rep = validate_dataset(tmp_path)
    assert rep == {"ok": False, "missing_files": ["manifest.json"], "checks": {}}


@pytest.mark.parametrize("name", ["images.placeholder", "images.initials"])
def test_sample_rejects_generators_with_required_arguments(name, capsys):
    with pytest.raises(ConfigError, match="needs arguments"):
        cmd_sample(name, 1)
    assert capsys.readouterr().out == ""
