from __future__ import annotations

import argparse
from typing import Sequence

from team_generator import constants


def configure_parser(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "kind",
        choices=["regions", "types", "natures"],
        help="Which option list to print.",
    )


def _lines(kind: str) -> list[str]:
    if kind == "regions":
        return [f"{name} - {low}..{high}" for name, (low, high) in constants.REGION_RANGES.items()]
    if kind == "types":
        return list(constants.TYPES)
    return list(constants.NATURES)


def main_from_parsed(args: argparse.Namespace) -> None:
    for line in _lines(args.kind):
        print(line)


def main(args: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="List supported filter options.")
    configure_parser(parser)
    opts = parser.parse_args(args)
    main_from_parsed(opts)


if __name__ == "__main__":
    main()
