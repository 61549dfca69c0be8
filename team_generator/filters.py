"""
Candidate predicates applied by the sampler.

Each predicate is independent; the sampler evaluates type, then legendary
class, then stage, stopping at the first failure.
"""

from __future__ import annotations

import random
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from team_generator import constants
from team_generator.models import Entity, LegendFlags, SpeciesMetadata


def selection_is_unrestricted(values: Sequence[str]) -> bool:
    return len(values) == 0 or constants.ALL_SENTINEL in values


def resolve_ranges(regions: Sequence[str]) -> List[Tuple[int, int]]:
    """Map selected regions to identifier ranges; unknown or empty selects everything."""
    if selection_is_unrestricted(regions):
        return [constants.REGION_RANGES[constants.ALL_SENTINEL]]
    ranges = [constants.REGION_RANGES[r] for r in regions if r in constants.REGION_RANGES]
    if not ranges:
        ranges.append(constants.REGION_RANGES[constants.ALL_SENTINEL])
    return ranges


def draw_identifier(ranges: Sequence[Tuple[int, int]], rng: random.Random) -> int:
    low, high = ranges[rng.randint(0, len(ranges) - 1)]
    return rng.randint(low, high)


def resolve_type_filter(types: Sequence[str]) -> List[str]:
    return [] if selection_is_unrestricted(types) else list(types)


def resolve_stage_set(stages: Sequence[str]) -> Optional[Set[int]]:
    """
    Stage depths to accept, or ``None`` when stage filtering is off.

    Filtering is off for an empty selection, "all", "any", every stage at
    once, or a selection with no known stage keys.
    """
    if selection_is_unrestricted(stages) or constants.ANY_STAGE in stages:
        return None
    depths = {constants.STAGE_KEYS[s] for s in stages if s in constants.STAGE_KEYS}
    if not depths or depths == set(constants.STAGE_KEYS.values()):
        return None
    return depths


def type_matches(entity: Entity, type_filters: Iterable[str]) -> bool:
    wanted = set(type_filters)
    if not wanted:
        return True
    return bool(wanted.intersection(entity.types))


def legend_matches(entity: Entity, species: SpeciesMetadata, flags: LegendFlags) -> bool:
    if not flags.any_active():
        return True

    is_legend = species.is_legendary
    is_myth = species.is_mythical
    name = (entity.name or "").lower()

    if flags.legendary and is_legend:
        return True
    if flags.mythical and is_myth:
        return True
    # Name-substring checks; the source has no flag for these classes.
    if flags.ultra_beast and "ub" in name:
        return True
    if flags.paradox and "paradox" in name:
        return True
    # Catch-all: anything that is neither legendary nor mythical.
    if flags.sub_legendary and not is_legend and not is_myth:
        return True
    return False


def stage_matches(stage: int, stage_set: Optional[Set[int]]) -> bool:
    if stage_set is None:
        return True
    return stage in stage_set
