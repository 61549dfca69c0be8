from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from team_generator import constants


@dataclass
class Entity:
    id: int
    name: str
    types: List[str] = field(default_factory=list)
    abilities: List[str] = field(default_factory=list)
    moves: List[str] = field(default_factory=list)
    sprite: str = ""


@dataclass
class SpeciesMetadata:
    name: str
    is_legendary: bool = False
    is_mythical: bool = False
    gender_rate: Optional[int] = None  # female-eighths; -1/None = genderless
    evolution_chain_url: Optional[str] = None


@dataclass
class EvolutionNode:
    name: str
    evolves_to: List["EvolutionNode"] = field(default_factory=list)


@dataclass(frozen=True)
class LegendFlags:
    sub_legendary: bool = False
    legendary: bool = False
    mythical: bool = False
    paradox: bool = False
    ultra_beast: bool = False

    def any_active(self) -> bool:
        return any((self.sub_legendary, self.legendary, self.mythical, self.paradox, self.ultra_beast))


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _clamp_quantity(raw) -> int:
    """Read the leading integer of ``raw`` ("4abc" -> 4, "2.5" -> 2) and clamp it to 1..6."""
    match = _LEADING_INT.match(str(raw)) if raw is not None else None
    if match is None:
        return constants.QUANTITY_DEFAULT
    value = int(match.group(1))
    if value == 0:
        # 0 is treated the same as unparseable input.
        return constants.QUANTITY_DEFAULT
    return max(constants.QUANTITY_MIN, min(constants.QUANTITY_MAX, value))


@dataclass(frozen=True)
class GenerationConfig:
    """
    Options for a single generation call.

    Built once per request and handed to the sampler; nothing reads
    presentation state while sampling.
    """

    quantity: int = constants.QUANTITY_DEFAULT
    regions: Tuple[str, ...] = ()
    types: Tuple[str, ...] = ()
    stages: Tuple[str, ...] = ()
    legend: LegendFlags = field(default_factory=LegendFlags)
    show_natures: bool = False
    show_genders: bool = False
    alt_forms: bool = False
    show_stats: bool = False
    generate_moves: bool = False
    generate_ability: bool = False
    eviv_mode: str = constants.EVIV_RANDOM

    @classmethod
    def build(
        cls,
        *,
        quantity=constants.QUANTITY_DEFAULT,
        regions: Iterable[str] = (),
        types: Iterable[str] = (),
        stages: Iterable[str] = (),
        legend: Optional[LegendFlags] = None,
        show_natures: bool = False,
        show_genders: bool = False,
        alt_forms: bool = False,
        show_stats: bool = False,
        generate_moves: bool = False,
        generate_ability: bool = False,
        eviv_mode: str = constants.EVIV_RANDOM,
    ) -> "GenerationConfig":
        """Normalize loosely-typed form input into a config."""
        mode = eviv_mode if eviv_mode in constants.EVIV_MODES else constants.EVIV_RANDOM
        return cls(
            quantity=_clamp_quantity(quantity),
            regions=tuple(r.lower() for r in regions),
            types=tuple(t.lower() for t in types),
            stages=tuple(stages),
            legend=legend or LegendFlags(),
            show_natures=show_natures,
            show_genders=show_genders,
            alt_forms=alt_forms,
            show_stats=show_stats,
            generate_moves=generate_moves,
            generate_ability=generate_ability,
            eviv_mode=mode,
        )


@dataclass
class RosterEntry:
    id: int
    name: str
    types: List[str] = field(default_factory=list)
    sprite: str = ""
    ability: Optional[str] = None
    moves: List[str] = field(default_factory=list)
    nature: Optional[str] = None
    item: Optional[str] = None
    gender: Optional[str] = None
    gender_rate: Optional[int] = None
    evs: Optional[Tuple[int, ...]] = None
    ivs: Optional[Tuple[int, ...]] = None


@dataclass
class GenerationResult:
    entries: List[RosterEntry]
    requested: int
    attempts: int
    state: str

    @property
    def generated(self) -> int:
        return len(self.entries)

    @property
    def status(self) -> str:
        return f"Generated {self.generated}/{self.requested} (attempts {self.attempts})"
