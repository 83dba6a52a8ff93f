"""
haveno-units - command line front end for the unit helpers.

Usage:
    haveno-units to-atomic 1.5              # 1500000000000
    haveno-units to-xmr 1500000000000       # 1.5
    haveno-units to-xmr 1 --exact           # 0.000000000001
    haveno-units centineros 250             # 2500000
    haveno-units divide 1 3                 # 0.33
    haveno-units timestamp 1700000000000    # 2023-11-14 22:13:20

Environment variables (alternative to flags):
    HAVENO_CONFIG plus the overrides listed in haveno_utils.config
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from haveno_utils.config import HavenoUtilsConfig, load_config
from haveno_utils.errors import HavenoUtilsError
from haveno_utils.logging_config import setup_logging_from_config
from haveno_utils.timestamps import format_timestamp
from haveno_utils.units import (
    convert_atomic_to_decimal,
    convert_centineros_to_atomic,
    convert_decimal_to_atomic,
    divide_scaled,
    format_atomic_units,
)

logger = logging.getLogger("haveno.cli")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="haveno-units",
        description="Convert Monero amounts between XMR, atomic units and centineros",
    )
    p.add_argument("--config", default=os.environ.get("HAVENO_CONFIG"),
                   help="Path to haveno.toml config file")
    p.add_argument("--log-level", default=None,
                   help="Override the configured log level")
    sub = p.add_subparsers(dest="command", required=True)

    s = sub.add_parser("to-atomic", help="XMR amount -> atomic units")
    s.add_argument("amount")

    s = sub.add_parser("to-xmr", help="atomic units -> XMR amount")
    s.add_argument("amount")
    s.add_argument("--exact", action="store_true",
                   help="Print an exact decimal string instead of a float")

    s = sub.add_parser("centineros", help="centineros -> atomic units")
    s.add_argument("centineros")

    s = sub.add_parser("divide", help="a / b truncated to two decimals")
    s.add_argument("a", type=int)
    s.add_argument("b", type=int)

    s = sub.add_parser("timestamp", help="format a millisecond epoch timestamp")
    s.add_argument("timestamp_ms", type=int)
    s.add_argument("--local", action="store_true", help="Use local time instead of UTC")
    return p


def run_command(args: argparse.Namespace, cfg: HavenoUtilsConfig) -> str:
    """Execute one parsed sub-command and return the text to print."""
    if args.command == "to-atomic":
        return str(convert_decimal_to_atomic(args.amount))
    if args.command == "to-xmr":
        if args.exact:
            return format_atomic_units(args.amount, cfg.display.decimals)
        return repr(convert_atomic_to_decimal(args.amount))
    if args.command == "centineros":
        return str(convert_centineros_to_atomic(args.centineros))
    if args.command == "divide":
        return repr(divide_scaled(args.a, args.b))
    if args.command == "timestamp":
        utc = cfg.display.utc and not args.local
        return format_timestamp(args.timestamp_ms, cfg.display.timestamp_format, utc=utc)
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # Load config (TOML + env overrides); CLI flags override config
    cfg = load_config(args.config)
    if args.log_level:
        cfg.logging.level = args.log_level.upper()
    setup_logging_from_config(cfg.logging)

    try:
        print(run_command(args, cfg))
    except (HavenoUtilsError, ValueError) as exc:
        logger.debug("%s failed: %s", args.command, exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
