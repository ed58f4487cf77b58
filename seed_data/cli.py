"""Command line entry points for generating seed tables."""

from __future__ import annotations

import argparse
import json
import sys
from datetime import date
from pathlib import Path
from typing import Any

import pandas as pd
import structlog

from seed_data.config import SeedConfig, TableSpec
from seed_data.observability import LOG_LEVELS, configure_logging
from seed_data.presets import PRESETS
from seed_data.recipes import render_select_sql
from seed_data.tables import build_table, load_table_spec

logger = structlog.get_logger(__name__)


def resolve_table_spec(name_or_path: str) -> TableSpec:
    """Return the preset called ``name_or_path`` or load it as a JSON spec file."""
    if name_or_path in PRESETS:
        return PRESETS[name_or_path]
    path = Path(name_or_path)
    if not path.is_file():
        raise ValueError(
            f"{name_or_path!r} is neither a preset ({sorted(PRESETS)}) nor a spec file"
        )
    return load_table_spec(path)


def _checked_output_path(path: Path) -> Path:
    output_path = path.resolve()
    cwd = Path.cwd().resolve()
    try:
        output_path.relative_to(cwd)
    except ValueError:
        raise ValueError(
            f"Output path {output_path} must reside within the current working directory"
        )
    return output_path


def _json_default(value: Any) -> Any:
    if isinstance(value, date):
        return value.isoformat()
    if hasattr(value, "item"):  # numpy scalars
        return value.item()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def write_frame(frame: pd.DataFrame, fmt: str, output: Path | None) -> None:
    """Write ``frame`` as CSV or JSON records to ``output`` or stdout."""
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        fh = output.open("w", encoding="utf-8", newline="")
    else:  # stdout fallback enables piping in shell usage.
        fh = sys.stdout
    try:
        if fmt == "csv":
            frame.to_csv(fh, index=False)
        else:
            records = frame.to_dict(orient="records")
            json.dump(records, fh, indent=2, default=_json_default)
            fh.write("\n")
    finally:
        if output is not None:
            fh.close()


def _parse_reference(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid reference date {value!r}; expected YYYY-MM-DD"
        )


def _generate(args: argparse.Namespace) -> int:
    spec = resolve_table_spec(args.spec)
    config = SeedConfig(seed=args.seed, reference=args.reference)
    frame = build_table(spec, config=config, rows=args.rows)

    output = _checked_output_path(args.output) if args.output else None
    write_frame(frame, args.format, output)
    if output is not None:
        logger.info("table_written", table=spec.name, rows=len(frame), path=str(output))
    return 0


def _sql(args: argparse.Namespace) -> int:
    spec = resolve_table_spec(args.spec)
    print(render_select_sql(spec, rows=args.rows, reference=args.reference))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seed-data",
        description="Generate randomized seed tables or the equivalent PostgreSQL.",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="info",
        help="Minimum log level written to stderr (default: info)",
    )
    parser.add_argument(
        "--json-logs", action="store_true", help="Emit logs as JSON lines"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    spec_help = f"Preset name ({', '.join(sorted(PRESETS))}) or path to a JSON table spec"

    gen = sub.add_parser("generate", help="Generate a seed table as CSV or JSON")
    gen.add_argument("spec", help=spec_help)
    gen.add_argument("--rows", type=int, help="Override the table's row count")
    gen.add_argument("--seed", type=int, help="RNG seed for reproducible output")
    gen.add_argument(
        "--reference",
        type=_parse_reference,
        help="Reference date for relative date columns (default: today)",
    )
    gen.add_argument("--format", choices=["csv", "json"], default="csv")
    gen.add_argument(
        "--output",
        type=Path,
        help="Optional output file inside the working directory (default: stdout)",
    )
    gen.set_defaults(handler=_generate)

    sql = sub.add_parser("sql", help="Print the PostgreSQL SELECT that builds the table")
    sql.add_argument("spec", help=spec_help)
    sql.add_argument("--rows", type=int, help="Override the table's row count")
    sql.add_argument(
        "--reference",
        type=_parse_reference,
        help="Fixed reference date instead of CURRENT_DATE",
    )
    sql.set_defaults(handler=_sql)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, json_output=args.json_logs)

    try:
        return args.handler(args)
    except (ValueError, OSError) as exc:
        # SeedDataError and pydantic.ValidationError are both ValueErrors
        logger.error("command_failed", command=args.command, error=str(exc))
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
