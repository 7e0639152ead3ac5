#!/usr/bin/env python3
"""Command line front end for the mathcore value types.

Usage:
    mathcore intersect "[0, 1]" "(0.5, 2)"
    mathcore inspect "[0, 1)" --contains 0 1
    mathcore nearly-equal 1e16 10000000000000001 --tolerance 1e-12
    mathcore ulp-diff 1.0 1.0000000000000002
    mathcore linear 2 3 --at 2

Negative numbers spelled with letters (``-inf``) must follow ``--``.
Defaults come from MATHCORE_TOLERANCE, MATHCORE_LOG_LEVEL and
MATHCORE_JSON_OUTPUT.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Callable, Dict, List, Optional, Sequence

import orjson

from mathcore.algebra import LinearFunction
from mathcore.config import ConfigurationError
from mathcore.logging_config import setup_logging
from mathcore.numeric import Epsilon, Interval
from mathcore.numeric.formatting import format_bound
from mathcore.settings import DEFAULT_LOG_LEVEL, CliSettings, load_cli_settings

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 2

Payload = Dict[str, Any]


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


def _run_intersect(args: argparse.Namespace, settings: CliSettings) -> Payload:
    first = Interval.parse(args.first)
    second = Interval.parse(args.second)
    result = first.intersect(second)
    logger.info("Intersected %s with %s", first, second)
    return {"intersection": str(result), "empty": result.is_empty()}


def _run_inspect(args: argparse.Namespace, settings: CliSettings) -> Payload:
    interval = Interval.parse(args.interval)
    payload: Payload = {
        "interval": str(interval),
        "empty": interval.is_empty(),
        "degenerate": interval.is_degenerate(),
        "length": interval.length(),
        "midpoint": interval.mid_point(),
    }
    if args.contains:
        payload["contains"] = {format_bound(x): interval.contains(x) for x in args.contains}
    return payload


def _run_nearly_equal(args: argparse.Namespace, settings: CliSettings) -> Payload:
    tolerance = settings.tolerance if args.tolerance is None else args.tolerance
    return {
        "nearly_equal": Epsilon.nearly_equal(args.x, args.y, tolerance),
        "tolerance": tolerance,
    }


def _run_ulp_diff(args: argparse.Namespace, settings: CliSettings) -> Payload:
    return {"ulp_diff": Epsilon.unit_in_the_last_place_diff(args.x, args.y)}


def _run_linear(args: argparse.Namespace, settings: CliSettings) -> Payload:
    function = LinearFunction.of(args.a, args.b)
    payload: Payload = {
        "function": str(function),
        "type": function.type.value,
        "root": function.root(),
    }
    if args.at:
        payload["values"] = {format_bound(x): float(function.apply(x)) for x in args.at}
    return payload


def _render_value(value: Any) -> str:
    if isinstance(value, bool):
        return _bool_text(value)
    if isinstance(value, float):
        return format_bound(value)
    return str(value)


def render_text(payload: Payload) -> str:
    """Render a command payload as ``key: value`` lines."""
    lines: List[str] = []
    for key, value in payload.items():
        if isinstance(value, dict):
            for inner_key, inner_value in value.items():
                lines.append(f"{key} {inner_key}: {_render_value(inner_value)}")
        else:
            lines.append(f"{key}: {_render_value(value)}")
    return "\n".join(lines)


def render_json(payload: Payload) -> str:
    """Render a command payload as JSON; NaN and infinities become null."""
    return orjson.dumps(payload).decode("utf-8")


_COMMANDS: Dict[str, Callable[[argparse.Namespace, CliSettings], Payload]] = {
    "intersect": _run_intersect,
    "inspect": _run_inspect,
    "nearly-equal": _run_nearly_equal,
    "ulp-diff": _run_ulp_diff,
    "linear": _run_linear,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mathcore", description="Intervals, tolerant comparison and linear functions")
    parser.add_argument("--json", action="store_true", default=None, help="Emit JSON instead of text")
    parser.add_argument("--log-level", type=str, default=None, help="Logging level (default: MATHCORE_LOG_LEVEL or WARNING)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    intersect = subparsers.add_parser("intersect", help="Intersect two intervals")
    intersect.add_argument("first", help="Interval text, e.g. '[0, 1)'")
    intersect.add_argument("second", help="Interval text, e.g. '(0.5, Infinity)'")

    inspect = subparsers.add_parser("inspect", help="Show length, midpoint and membership of an interval")
    inspect.add_argument("interval", help="Interval text")
    inspect.add_argument("--contains", type=float, nargs="+", default=None, help="Values to test for membership")

    nearly_equal = subparsers.add_parser("nearly-equal", help="Compare two numbers with a relative tolerance")
    nearly_equal.add_argument("x", type=float)
    nearly_equal.add_argument("y", type=float)
    nearly_equal.add_argument("--tolerance", type=float, default=None, help="Relative tolerance (default: MATHCORE_TOLERANCE or 1e-12)")

    ulp_diff = subparsers.add_parser("ulp-diff", help="Count representable doubles between two numbers")
    ulp_diff.add_argument("x", type=float)
    ulp_diff.add_argument("y", type=float)

    linear = subparsers.add_parser("linear", help="Describe f(x) = a*x + b")
    linear.add_argument("a", type=float)
    linear.add_argument("b", type=float)
    linear.add_argument("--at", type=float, nargs="+", default=None, help="Points at which to evaluate f")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point; returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_cli_settings()
        setup_logging(args.log_level if args.log_level is not None else settings.log_level_value)
    except (ConfigurationError, ValueError) as exc:
        setup_logging(DEFAULT_LOG_LEVEL)
        logger.error("Invalid mathcore configuration: %s", exc)
        print(f"mathcore: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    json_output = settings.json_output if args.json is None else args.json

    try:
        payload = _COMMANDS[args.command](args, settings)
    except ValueError as exc:
        logger.error("Command %s rejected its input: %s", args.command, exc)
        logger.debug("Rejected %s input traceback", args.command, exc_info=True)
        print(f"mathcore: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    print(render_json(payload) if json_output else render_text(payload))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
