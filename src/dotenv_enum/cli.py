from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .declarations import find_pyproject, load_groups
from .errors import DeclarationError
from .loader import load_env
from .registry import EnvGroup

CAST_TARGETS = {"str": str, "int": int, "float": float, "bool": bool}


def _groups(args: argparse.Namespace) -> list[EnvGroup]:
    path = args.pyproject or find_pyproject()
    return load_groups(path)


def _load_env_file(args: argparse.Namespace) -> None:
    load_env(args.env_file)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def keys_cmd(args: argparse.Namespace) -> int:
    groups = _groups(args)
    if args.group:
        groups = [g for g in groups if g.name == args.group]
        if not groups:
            print(f"Unknown group: {args.group}", file=sys.stderr)
            return 2
    for group in groups:
        for key in group.keys():
            print(key)
    return 0


def check_cmd(args: argparse.Namespace) -> int:
    groups = _groups(args)
    _load_env_file(args)
    missing = [
        var.key()
        for group in groups
        for var in group.members()
        if var.lookup().is_absent()
    ]
    for key in missing:
        print(key)
    return 1 if missing else 0


def get_cmd(args: argparse.Namespace) -> int:
    groups = _groups(args)
    var = None
    for group in groups:
        var = group.find_by_key(args.key)
        if var is not None:
            break
    if var is None:
        print(f"{args.key} is not declared", file=sys.stderr)
        return 2
    _load_env_file(args)
    result = var.cast(CAST_TARGETS[args.cast])
    if not result.is_present():
        print(result.message, file=sys.stderr)
        return 1
    value = result.value
    if isinstance(value, bool):
        value = str(value).lower()
    print(value)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dotenv-enum",
        description="Inspect environment variables declared in pyproject.toml.",
    )
    parser.add_argument("--pyproject", type=Path, help="Path to pyproject.toml")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="cmd")

    p_keys = subparsers.add_parser("keys", help="Print declared variable names.")
    p_keys.add_argument("group", nargs="?", help="Only print keys of GROUP")
    p_keys.set_defaults(func=keys_cmd)

    p_check = subparsers.add_parser("check", help="Report declared variables that are not set.")
    p_check.add_argument("--env-file", type=Path, help="Path to the .env file")
    p_check.set_defaults(func=check_cmd)

    p_get = subparsers.add_parser("get", help="Print the value of KEY.")
    p_get.add_argument("key")
    p_get.add_argument("--env-file", type=Path, help="Path to the .env file")
    p_get.add_argument("--as", dest="cast", choices=sorted(CAST_TARGETS), default="str")
    p_get.set_defaults(func=get_cmd)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    func = getattr(args, "func", None)
    if func is None:
        parser.print_help()
        return 1
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    try:
        return int(func(args))
    except DeclarationError as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
