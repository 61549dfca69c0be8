from __future__ import annotations

import argparse
import asyncio
import logging
import random
from pathlib import Path
from typing import Iterable, Sequence

from team_generator import constants
from team_generator.engine import RosterSampler
from team_generator.errors import EmptyRosterError
from team_generator.models import GenerationConfig, LegendFlags
from team_generator.presentation import render_text
from team_generator.selection import Selection, reduce_selection
from team_generator.showdown import export_roster
from team_generator.source import PokeAPISource


def _fold(keys: Iterable[str] | None) -> Selection:
    selection = Selection()
    for key in keys or []:
        selection = reduce_selection(selection, key, True)
    return selection


def configure_parser(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--quantity", default=str(constants.QUANTITY_DEFAULT), help="Team size, 1-6 (default 3).")
    parser.add_argument(
        "--region",
        action="append",
        choices=sorted(constants.REGION_RANGES),
        help="Restrict to a region; repeat for several. 'all' clears the others.",
    )
    parser.add_argument(
        "--type",
        action="append",
        choices=[constants.ALL_SENTINEL] + constants.TYPES,
        help="Require at least one of these types; repeat for several.",
    )
    parser.add_argument(
        "--stage",
        action="append",
        choices=[constants.ALL_SENTINEL, constants.ANY_STAGE] + list(constants.STAGE_KEYS),
        help="Evolution stage filter; repeat for several.",
    )
    parser.add_argument("--sub-legendary", action="store_true", help="Accept non-legendary, non-mythical species.")
    parser.add_argument("--legendary", action="store_true", help="Accept legendary species.")
    parser.add_argument("--mythical", action="store_true", help="Accept mythical species.")
    parser.add_argument("--paradox", action="store_true", help="Accept species whose name contains 'paradox'.")
    parser.add_argument("--ultra-beast", action="store_true", help="Accept species whose name contains 'ub'.")
    parser.add_argument("--show-natures", action="store_true", help="Roll a nature for each member.")
    parser.add_argument("--show-genders", action="store_true", help="Show gender labels.")
    parser.add_argument("--alt-forms", action="store_true", help="Accepted for parity with the web form; no effect.")
    parser.add_argument("--show-stats", action="store_true", help="Roll held item, EVs and IVs.")
    parser.add_argument("--moves", action="store_true", help="Pick up to four moves per member.")
    parser.add_argument("--ability", action="store_true", help="Pick an ability per member.")
    parser.add_argument(
        "--eviv-mode",
        choices=list(constants.EVIV_MODES),
        default=constants.EVIV_RANDOM,
        help="Competitive presets with perfect IVs, or fully random spreads.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed the random source for a reproducible team.")
    parser.add_argument("--export", type=Path, default=None, help=f"Write the team-builder export here (e.g. {constants.EXPORT_FILENAME}).")
    parser.add_argument("--max-attempts", type=int, default=constants.MAX_ATTEMPTS, help="Sampling attempt ceiling.")
    parser.add_argument("--timeout", type=float, default=constants.FETCH_TIMEOUT_SECONDS, help="Per-request timeout in seconds.")
    parser.add_argument("--base-url", default=constants.POKEAPI_BASE_URL, help="PokeAPI base URL.")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG shows each rejected candidate).")


def config_from_args(args: argparse.Namespace) -> GenerationConfig:
    return GenerationConfig.build(
        quantity=args.quantity,
        regions=_fold(args.region).as_tuple(),
        types=_fold(args.type).as_tuple(),
        stages=_fold(args.stage).as_tuple(),
        legend=LegendFlags(
            sub_legendary=args.sub_legendary,
            legendary=args.legendary,
            mythical=args.mythical,
            paradox=args.paradox,
            ultra_beast=args.ultra_beast,
        ),
        show_natures=args.show_natures,
        show_genders=args.show_genders,
        alt_forms=args.alt_forms,
        show_stats=args.show_stats,
        generate_moves=args.moves,
        generate_ability=args.ability,
        eviv_mode=args.eviv_mode,
    )


def _sample(source, rng: random.Random, config: GenerationConfig, args: argparse.Namespace):
    sampler = RosterSampler(source, rng=rng, max_attempts=args.max_attempts, fetch_timeout=args.timeout)
    return asyncio.run(sampler.generate(config))


def main_from_parsed(args: argparse.Namespace, source=None) -> None:
    logging.basicConfig(level=str(args.log_level).upper(), format="[%(name)s] %(message)s")
    config = config_from_args(args)
    rng = random.Random(args.seed)
    if source is None:
        with PokeAPISource(base_url=args.base_url, timeout=args.timeout) as api:
            result = _sample(api, rng, config, args)
    else:
        result = _sample(source, rng, config, args)
    print(render_text(result.entries))
    print(result.status)

    if args.export is None:
        return
    try:
        text = export_roster(result.entries, config, rng)
    except EmptyRosterError as exc:
        print(exc)
        raise SystemExit(1) from exc
    args.export.parent.mkdir(parents=True, exist_ok=True)
    args.export.write_text(text, encoding="utf-8")
    print(f"Wrote {len(result.entries)} entries to {args.export}")


def main(args: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Generate a random Pokémon team from PokeAPI.")
    configure_parser(parser)
    opts = parser.parse_args(args)
    main_from_parsed(opts)


if __name__ == "__main__":
    main()
