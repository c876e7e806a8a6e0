"""Command line entry point: ``python -m classic_algorithms``."""
from __future__ import annotations

import argparse
import json
import sys
from typing import Any, List, Optional

from .algorithm_manager import AlgorithmCategory, AlgorithmManager, load_manager_settings
from .common.configuration import build_hub, use_hub
from .common.logging import configure_from_settings
from .errors import AlgorithmError


def _decode(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="classic_algorithms", description=__doc__)
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="YAML file layered over the packaged defaults",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="list registered algorithms")
    list_parser.add_argument(
        "--category",
        choices=[category.value for category in AlgorithmCategory],
        help="only list algorithms of this category",
    )
    list_parser.add_argument(
        "-l",
        "--long",
        action="store_true",
        help="also print the first docstring line of each algorithm",
    )

    run_parser = subparsers.add_parser("run", help="run an algorithm by name")
    run_parser.add_argument("name", help="registered algorithm name")
    run_parser.add_argument(
        "args",
        nargs="*",
        help="positional arguments, decoded as JSON when possible",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    hub = use_hub(build_hub(args.config))
    configure_from_settings(hub)
    manager = AlgorithmManager(load_manager_settings(hub))
    try:
        if args.command == "list":
            category = AlgorithmCategory(args.category) if args.category else None
            for name in manager.registry.list_algorithms(category):
                if args.long:
                    summary = manager.registry.get_algorithm(name).summary()
                    print(f"{name:<22}{summary}".rstrip())
                else:
                    print(name)
            return 0

        try:
            result = manager.execute_algorithm(args.name, *[_decode(a) for a in args.args])
        except AlgorithmError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2
        print(json.dumps(result, ensure_ascii=False, default=str))
        return 0
    finally:
        manager.shutdown()


if __name__ == "__main__":
    sys.exit(main())
