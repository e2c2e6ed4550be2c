from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from typing import Any

from rf_utility.constants import NO_SUBCOMMAND_MESSAGE, TOOL_ABOUT, TOOL_NAME, TOOL_VERSION
from rf_utility.data_models.models import OPERATIONS, OperationResult
from rf_utility.engine import ARGUMENT_NAMES, evaluate, format_result

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
_GLOBAL_FLAGS = {"--json", "--version", "-h", "--help"}

_SUBCOMMANDS: dict[str, tuple[str, dict[str, str]]] = {
    "power_conversion": (
        "Transmitter Power mW <-> dBm Conversion",
        {"value": "The value to convert, followed by its unit (mW or dBm)"},
    ),
    "path_loss": (
        "Free Space Path Loss Calculation",
        {"frequency": "Frequency in MHz", "distance": "Distance in meters"},
    ),
    "link_range": (
        "RF Link Range Calculation",
        {
            "transmitter_power": "Transmitter power in dBm",
            "receiver_sensitivity": "Receiver sensitivity in dBm",
            "frequency": "Frequency in MHz",
        },
    ),
    "times_further": (
        "Times Further Calculation",
        {
            "current_distance": "Current distance in meters",
            "new_distance": "New distance in meters",
        },
    ),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rf-utility",
        description=f"{TOOL_NAME}: {TOOL_ABOUT}",
        allow_abbrev=False,
    )
    parser.add_argument("--version", action="version", version=f"{TOOL_NAME} {TOOL_VERSION}")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full result as JSON instead of the bare value.",
    )
    parser.add_argument("--log-level", default="WARNING", choices=LOG_LEVELS)

    subparsers = parser.add_subparsers(dest="command")
    for name in OPERATIONS:
        about, arguments = _SUBCOMMANDS[name]
        sub = subparsers.add_parser(name, help=about, description=about, allow_abbrev=False)
        for arg_name in ARGUMENT_NAMES[name]:
            if name == "power_conversion":
                # "-10dBm" looks like an option to argparse; main() recovers it from extras.
                sub.add_argument(arg_name, nargs="?", help=arguments[arg_name])
            else:
                sub.add_argument(arg_name, help=arguments[arg_name])
    return parser


def _first_positional(argv: Sequence[str]) -> str | None:
    """Return the subcommand token, or None when argparse must decide."""
    tokens = iter(argv)
    for token in tokens:
        if token == "--log-level":
            next(tokens, None)
            continue
        if token in _GLOBAL_FLAGS or token.startswith("--log-level="):
            continue
        if token.startswith("-"):
            return None
        return token
    return None


def _json_payload(result: OperationResult) -> dict[str, Any]:
    payload = result.model_dump(mode="json")
    if result.value is not None and not result.is_finite:
        payload["value"] = str(result.value)
    return payload


def _write_result(result: OperationResult, as_json: bool) -> None:
    if as_json:
        json.dump(_json_payload(result), sys.stdout, indent=2, sort_keys=True, allow_nan=False)
        sys.stdout.write("\n")
        return
    sys.stdout.write(format_result(result) + "\n")


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    command = _first_positional(argv)
    if command is not None and command not in OPERATIONS:
        print(NO_SUBCOMMAND_MESSAGE)
        return 0

    parser = build_parser()
    args, extras = parser.parse_known_args(argv)
    if args.command == "power_conversion" and args.value is None and len(extras) == 1:
        args.value = extras.pop()
    if args.command == "power_conversion" and args.value is None:
        parser.error("the following arguments are required: value")
    if extras:
        parser.error(f"unrecognized arguments: {' '.join(extras)}")

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )
    if args.command is None:
        print(NO_SUBCOMMAND_MESSAGE)
        return 0

    raw_args = [getattr(args, name) for name in ARGUMENT_NAMES[args.command]]
    _write_result(evaluate(args.command, raw_args), args.json)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
