"""
Battle attribute synthesis for accepted candidates.

Every helper takes the random source explicitly so a seeded ``random.Random``
reproduces a roster exactly.
"""

from __future__ import annotations

import math
import random
from typing import List, Optional, Sequence, Tuple

from team_generator import constants
from team_generator.models import Entity, GenerationConfig, RosterEntry, SpeciesMetadata

GENDERLESS = "Genderless"
MALE = "Male"
FEMALE = "Female"


def humanize(name: Optional[str]) -> str:
    """``"solar-power"`` -> ``"Solar power"``."""
    if not name:
        return ""
    text = name.replace("-", " ")
    return text[0].upper() + text[1:]


def pick_ability(abilities: Sequence[str], rng: random.Random) -> Optional[str]:
    if not abilities:
        return None
    return abilities[rng.randint(0, len(abilities) - 1)]


def pick_moves(pool: Sequence[str], rng: random.Random, max_moves: int = 4) -> List[str]:
    """
    Draw up to ``max_moves`` distinct moves from the pool.

    Rejection sampling with a fixed ceiling; whatever was collected when the
    ceiling is hit is returned. An empty pool yields the single fallback move.
    """
    if not pool:
        return [constants.FALLBACK_MOVE]

    names = [humanize(m) for m in pool]
    target = min(max_moves, len(set(names)))
    chosen: List[str] = []
    used = set()
    attempts = 0
    while len(chosen) < target and attempts < constants.MOVE_PICK_CEILING:
        attempts += 1
        move = names[rng.randint(0, len(names) - 1)]
        if move not in used:
            used.add(move)
            chosen.append(move)
    return chosen


def random_nature(rng: random.Random) -> str:
    return constants.NATURES[rng.randint(0, len(constants.NATURES) - 1)]


def random_item(rng: random.Random) -> str:
    return constants.SAMPLE_ITEMS[rng.randint(0, len(constants.SAMPLE_ITEMS) - 1)]


def format_gender(gender_rate: Optional[int]) -> str:
    if gender_rate is None or gender_rate == -1:
        return GENDERLESS
    if gender_rate == 0:
        return MALE
    if gender_rate == 8:
        return FEMALE
    # Half-up rounding: 1/8 -> 13%, 5/8 -> 63%.
    percent = math.floor(gender_rate / 8 * 100 + 0.5)
    return f"{percent}% {FEMALE}"


def competitive_evs(rng: random.Random) -> Tuple[int, ...]:
    presets = constants.COMPETITIVE_EV_PRESETS
    return presets[rng.randint(0, len(presets) - 1)]


def random_evs(rng: random.Random) -> Tuple[int, ...]:
    """
    Allocate each axis a random share of what is left, then hand out any
    remainder one point at a time to axes still under the per-axis cap.
    """
    values = [0] * constants.STAT_COUNT
    remaining = constants.EV_TOTAL_MAX
    for i in range(constants.STAT_COUNT):
        cap = min(constants.EV_AXIS_MAX, remaining)
        values[i] = rng.randint(0, cap)
        remaining -= values[i]

    while remaining > 0:
        idx = rng.randint(0, constants.STAT_COUNT - 1)
        if values[idx] < constants.EV_AXIS_MAX:
            values[idx] += 1
            remaining -= 1
            continue
        open_axes = [j for j, v in enumerate(values) if v < constants.EV_AXIS_MAX]
        if not open_axes:
            break
        values[open_axes[0]] += 1
        remaining -= 1
    return tuple(values)


def competitive_ivs() -> Tuple[int, ...]:
    return (constants.IV_MAX,) * constants.STAT_COUNT


def random_ivs(rng: random.Random) -> Tuple[int, ...]:
    return tuple(rng.randint(0, constants.IV_MAX) for _ in range(constants.STAT_COUNT))


def synthesize_entry(
    entity: Entity,
    species: SpeciesMetadata,
    config: GenerationConfig,
    rng: random.Random,
) -> RosterEntry:
    """Build a roster entry for an accepted candidate according to the toggles."""
    entry = RosterEntry(
        id=entity.id,
        name=entity.name,
        types=list(entity.types),
        sprite=entity.sprite,
        gender_rate=species.gender_rate,
    )

    if config.generate_ability:
        entry.ability = pick_ability(entity.abilities, rng)
    if config.generate_moves:
        entry.moves = pick_moves(entity.moves, rng, 4)

    if config.show_stats:
        entry.item = random_item(rng)
        entry.nature = random_nature(rng) if config.show_natures else None
        if config.eviv_mode == constants.EVIV_COMPETITIVE:
            entry.evs = competitive_evs(rng)
            entry.ivs = competitive_ivs()
        else:
            entry.evs = random_evs(rng)
            entry.ivs = random_ivs(rng)
    else:
        entry.nature = random_nature(rng) if config.show_natures else None

    entry.gender = format_gender(species.gender_rate) if config.show_genders else None
    return entry
