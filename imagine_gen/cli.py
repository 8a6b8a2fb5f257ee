from __future__ import annotations
import argparse, dataclasses, inspect, json, logging
from pathlib import Path

from imagine_gen import __version__
from imagine_gen.core.config import load_config
from imagine_gen.core.errors import ConfigError
from imagine_gen.core.manifest import write_manifest
from imagine_gen.core.rng import RNG
from imagine_gen.core.seed import seed as seed_global
from imagine_gen.core.validation import validate_dataset
from imagine_gen.dataset.tables import accepts_seed, build_dataset, resolve_generator, table_filename, write_table

logger = logging.getLogger("imagine_gen.cli")


def _json_default(value):
    if dataclasses.is_dataclass(value):
        return dataclasses.asdict(value)
    return str(value)


def cmd_generate(cfg_path: Path, out_dir: Path) -> None:
    cfg = load_config(cfg_path)
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    tables = build_dataset(cfg)
    row_counts = {}
    for name, df in tables.items():
        write_table(df, out_dir, name, cfg.format)
        row_counts[table_filename(name, cfg.format)] = len(df)
        logger.info("%s: %d rows", name, len(df))

    path = write_manifest(
        out_dir,
        dataset_name=cfg.dataset_name,
        dataset_version=cfg.dataset_version,
        generator_version=f"imagine-gen-{__version__}",
        config_sha256=cfg.config_sha256,
        seed=cfg.seed,
        fmt=cfg.format,
        row_counts=row_counts,
    )
    logger.info("Manifest written to %s", path)


def cmd_validate_dataset(out_dir: Path) -> None:
    rep = validate_dataset(Path(out_dir))
    print(json.dumps(rep, indent=2))
    if not rep["ok"]:
        raise SystemExit(2)


def cmd_sample(generator: str, n: int, seed=None, global_seed=None) -> None:
    fn = resolve_generator(generator)
    try:
        inspect.signature(fn).bind()
    except TypeError:
        raise ConfigError(f"{generator} needs arguments and cannot be sampled bare; use it from a config") from None
    if global_seed is not None:
        seed_global(global_seed)
    # a local seed gives each sample its own child stream; otherwise the global stream is shared
    rng = RNG(seed) if seed is not None else None
    for _ in range(n):
        value = fn(seed=rng.child_seed()) if rng is not None and accepts_seed(fn) else fn()
        print(json.dumps(value, default=_json_default, ensure_ascii=False))


def main(argv=None):
    ap = argparse.ArgumentParser(prog="imagine-gen")
    ap.add_argument("-v", "--verbose", action="store_true")
    sub = ap.add_subparsers(dest="cmd", required=True)
    g = sub.add_parser("generate")
    g.add_argument("config")
    g.add_argument("--out", required=True)
    v = sub.add_parser("validate-dataset")
    v.add_argument("out_dir")
    s = sub.add_parser("sample")
    s.add_argument("generator", help="module.function, e.g. person.email")
    s.add_argument("-n", type=int, default=1)
    s.add_argument("--seed", default=None)
    s.add_argument("--global-seed", default=None)
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        if args.cmd == "generate":
            cmd_generate(Path(args.config), Path(args.out))
        elif args.cmd == "validate-dataset":
            cmd_validate_dataset(Path(args.out_dir))
        elif args.cmd == "sample":
            cmd_sample(args.generator, args.n, _seed_arg(args.seed), _seed_arg(args.global_seed))
    except ConfigError as e:
        ap.error(str(e))


def _seed_arg(raw):
    # "42" seeds like the integer 42; anything else is hashed as text
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return raw


if __name__ == "__main__":
    main()
