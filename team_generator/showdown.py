"""
Team-builder text export.

Block layout per entry::

    Name (F) @ Item
    Ability: X
    Level: 63
    Happiness: 134
    EVs: 4 HP / 252 Atk / 252 Spe
    Jolly Nature
    IVs: 31 HP / 31 Atk / 31 Def / 31 SpA / 31 SpD / 31 Spe
    - Move
"""

from __future__ import annotations

import random
from typing import List, Optional, Sequence

from team_generator import constants
from team_generator.errors import EmptyRosterError
from team_generator.models import GenerationConfig, RosterEntry
from team_generator.synthesis import FEMALE, MALE, humanize


def display_name(name: str) -> str:
    return name[:1].upper() + name[1:]


def format_stat_line(values: Optional[Sequence[int]], prefix: str) -> str:
    """Nonzero axes only, in HP/Atk/Def/SpA/SpD/Spe order; empty string when none."""
    if not values:
        return ""
    parts = [f"{v} {label}" for v, label in zip(values, constants.STAT_LABELS) if v and v > 0]
    if not parts:
        return ""
    return f"{prefix}: {' / '.join(parts)}"


def gender_suffix(gender: Optional[str]) -> str:
    if gender == MALE:
        return " (M)"
    if gender == FEMALE:
        return " (F)"
    return ""


def format_entry(entry: RosterEntry, config: GenerationConfig, happiness: int) -> str:
    lines: List[str] = []

    header = display_name(entry.name)
    if config.show_genders:
        header += gender_suffix(entry.gender)
    if config.show_stats:
        header += f" @ {entry.item}" if entry.item else " @ No Item"
    lines.append(header)

    if config.generate_ability and entry.ability:
        lines.append(f"Ability: {humanize(entry.ability)}")

    lines.append(f"Level: {constants.EXPORT_LEVEL}")
    lines.append(f"Happiness: {happiness}")

    if config.show_stats:
        ev_line = format_stat_line(entry.evs, "EVs")
        if ev_line:
            lines.append(ev_line)

    if config.show_natures and entry.nature:
        lines.append(f"{entry.nature} Nature")

    if config.show_stats:
        iv_line = format_stat_line(entry.ivs, "IVs")
        if iv_line:
            lines.append(iv_line)

    if config.generate_moves:
        moves = [humanize(m) for m in entry.moves[:4]] or list(constants.EXPORT_FALLBACK_MOVES)
        lines.extend(f"- {m}" for m in moves)

    return "\n".join(lines)


def export_roster(
    entries: Sequence[RosterEntry],
    config: GenerationConfig,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Serialize the roster; happiness is re-rolled here for every entry.

    Raises ``EmptyRosterError`` when there is nothing to export.
    """
    if not entries:
        raise EmptyRosterError()
    rng = rng or random.Random()
    blocks = [format_entry(e, config, rng.randint(0, constants.HAPPINESS_MAX)) for e in entries]
    return "\n\n".join(blocks) + "\n"
