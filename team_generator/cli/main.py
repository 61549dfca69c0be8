from __future__ import annotations

import argparse
from typing import Sequence

from team_generator.cli import catalog, generate


def main(args: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Random Pokémon team generator (sampling, filters, team-builder export)."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate", help="Sample a filtered team and optionally export it"
    )
    generate.configure_parser(generate_parser)

    list_parser = subparsers.add_parser(
        "list", help="List regions, types or natures"
    )
    catalog.configure_parser(list_parser)

    opts = parser.parse_args(args)

    if opts.command == "generate":
        generate.main_from_parsed(opts)
    elif opts.command == "list":
        catalog.main_from_parsed(opts)
    else:
        parser.error(f"Unknown command {opts.command}")


if __name__ == "__main__":
    main()
