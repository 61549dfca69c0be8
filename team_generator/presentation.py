"""Display contract for a generated roster (cards laid out in rows)."""

from __future__ import annotations

import math
from typing import List

from team_generator.models import RosterEntry
from team_generator.showdown import display_name, format_stat_line, gender_suffix

MAX_COLUMNS = 3


def distribute_counts_symmetric(n: int, max_cols: int = MAX_COLUMNS) -> List[int]:
    """Split ``n`` cards into rows of near-equal size, larger rows first."""
    if n <= 0:
        return []
    if n <= max_cols:
        return [n]
    rows = math.ceil(n / max_cols)
    base, rest = divmod(n, rows)
    return [base + 1 if i < rest else base for i in range(rows)]


def card_title(entry: RosterEntry) -> str:
    return display_name(entry.name) + gender_suffix(entry.gender)


def type_label(entry: RosterEntry) -> str:
    return " / ".join(display_name(t) for t in entry.types)


def card_lines(entry: RosterEntry) -> List[str]:
    lines: List[str] = []
    if entry.ability:
        lines.append(f"Ability: {entry.ability.replace('-', ' ')}")
    if entry.gender:
        lines.append(f"Gender: {entry.gender}")
    if entry.nature:
        lines.append(f"Nature: {entry.nature}")
    if entry.item:
        lines.append(f"Item: {entry.item}")
    ev_line = format_stat_line(entry.evs, "EVs")
    if ev_line:
        lines.append(ev_line)
    iv_line = format_stat_line(entry.ivs, "IVs")
    if iv_line:
        lines.append(iv_line)
    if entry.moves:
        lines.append("Moves: " + " • ".join(entry.moves))
    return lines


def render_text(entries: List[RosterEntry]) -> str:
    """Plain-text rendering used by the CLI."""
    if not entries:
        return "No Pokémon matched."
    out: List[str] = []
    idx = 0
    for row_number, count in enumerate(distribute_counts_symmetric(len(entries)), start=1):
        out.append(f"-- Row {row_number} --")
        for entry in entries[idx : idx + count]:
            out.append(f"#{entry.id} {card_title(entry)} [{type_label(entry)}]")
            out.extend(f"    {line}" for line in card_lines(entry))
        idx += count
    return "\n".join(out)
