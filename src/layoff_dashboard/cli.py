"""Command-line interface for the layoff summaries.

Provides subcommands: `top`, `monthly`, and `all`. Each command is
implemented as a `cmd_*` function that accepts an argparse namespace.
"""
from __future__ import annotations

import argparse
import json
import logging
from typing import Sequence

from dotenv import load_dotenv
import pandas as pd
from pydantic import BaseModel

from layoff_dashboard.config import Settings, get_settings
from layoff_dashboard.logging_config import configure_logging
from layoff_dashboard.ingest.load_records import load_layoff_records
from layoff_dashboard.aggregate import aggregate_monthly, aggregate_top_companies, entries_to_frame
from layoff_dashboard.models import LayoffRecord

log = logging.getLogger(__name__)


# --------------------------------------------------
# Helpers
# --------------------------------------------------
def _settings(args: argparse.Namespace) -> Settings:
    return get_settings(data_source=getattr(args, "source", None))


def _load(settings: Settings) -> list[LayoffRecord]:
    return load_layoff_records(settings.data_source, settings.data_cache_dir)


def format_entries(entries: Sequence[BaseModel], as_json: bool = False) -> str:
    """Render aggregation entries as a plain table or a JSON array.

    Args:
        entries: Aggregated company or month entries.
        as_json: Emit JSON instead of a table.

    Returns:
        The rendered text. An empty table renders as "(no data)".
    """
    if as_json:
        return json.dumps([e.model_dump() for e in entries], indent=2)
    if not entries:
        return "(no data)"
    df: pd.DataFrame = entries_to_frame(entries)
    return df.to_string(index=False, formatters={c: "{:,}".format for c in df.columns[1:]})


# --------------------------------------------------
# TOP COMPANIES
# --------------------------------------------------
def cmd_top(args: argparse.Namespace) -> None:
    """Print the top companies by total layoffs.

    Args:
        args: argparse namespace with `source`, `top_n`, `json`.
    """
    s = _settings(args)
    top_n = s.top_n if args.top_n is None else args.top_n
    entries = aggregate_top_companies(_load(s), limit=top_n)
    log.info("Top companies computed: %d entries", len(entries))
    print(format_entries(entries, args.json))


# --------------------------------------------------
# MONTHLY
# --------------------------------------------------
def cmd_monthly(args: argparse.Namespace) -> None:
    """Print total layoffs per calendar month."""
    s = _settings(args)
    entries = aggregate_monthly(_load(s))
    log.info("Monthly series computed: %d months", len(entries))
    print(format_entries(entries, args.json))


# --------------------------------------------------
# ALL
# --------------------------------------------------
def cmd_all(args: argparse.Namespace) -> None:
    """Convenience: load once, print both summaries."""
    s = _settings(args)
    top_n = s.top_n if args.top_n is None else args.top_n
    records = _load(s)

    top = aggregate_top_companies(records, limit=top_n)
    monthly = aggregate_monthly(records)

    if args.json:
        print(json.dumps(
            {
                "top_companies": [e.model_dump() for e in top],
                "monthly": [e.model_dump() for e in monthly],
            },
            indent=2,
        ))
        return

    print(f"Top {top_n} Companies by Layoffs")
    print(format_entries(top))
    print()
    print("Monthly Layoffs")
    print(format_entries(monthly))


# --------------------------------------------------
# CLI
# --------------------------------------------------
def _non_negative_int(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level argument parser for the CLI.

    The returned parser has subcommands `top`, `monthly`, and `all`.

    Returns:
        Configured argparse.ArgumentParser instance.
    """
    p = argparse.ArgumentParser(prog="layoff-dashboard")
    sub = p.add_subparsers(dest="cmd", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--source", default=None, help="CSV/JSON path or URL (overrides LAYOFFS_DATA_SOURCE)")
    common.add_argument("--json", action="store_true", help="print JSON instead of a table")

    p_top = sub.add_parser("top", parents=[common])
    p_top.add_argument("--top-n", type=_non_negative_int, default=None)

    sub.add_parser("monthly", parents=[common])

    p_all = sub.add_parser("all", parents=[common])
    p_all.add_argument("--top-n", type=_non_negative_int, default=None)

    return p


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point: parse args, configure logging and dispatch commands."""
    load_dotenv()
    args = build_parser().parse_args(argv)
    configure_logging(_settings(args).log_path)

    if args.cmd == "top":
        cmd_top(args)
    elif args.cmd == "monthly":
        cmd_monthly(args)
    elif args.cmd == "all":
        cmd_all(args)
    else:
        raise SystemExit(2)


if __name__ == "__main__":
    main()
