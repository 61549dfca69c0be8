from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from team_generator import constants
from team_generator.models import GenerationConfig, LegendFlags, RosterEntry

StageKey = Literal["all", "any", "unevolved", "evolvedOnce", "evolvedTwice"]


class LegendOptions(BaseModel):
    sub_legendary: bool = False
    legendary: bool = False
    mythical: bool = False
    paradox: bool = False
    ultra_beast: bool = False


class GenerateOptions(BaseModel):
    quantity: Optional[str | int] = Field(default=constants.QUANTITY_DEFAULT, description="1-6; unparseable -> 3")
    regions: List[str] = Field(default_factory=list, description="Region keys; empty or 'all' = every region")
    types: List[str] = Field(default_factory=list, description="Type keys; empty or 'all' = unrestricted")
    stages: List[StageKey] = Field(default_factory=list, description="unevolved / evolvedOnce / evolvedTwice / any")
    legend: LegendOptions = Field(default_factory=LegendOptions)
    show_natures: bool = False
    show_genders: bool = False
    alt_forms: bool = False
    show_stats: bool = False
    generate_moves: bool = False
    generate_ability: bool = False
    eviv_mode: Literal["competitive", "random"] = constants.EVIV_RANDOM
    seed: Optional[int] = Field(default=None, description="Seed for a reproducible team")

    def to_config(self) -> GenerationConfig:
        return GenerationConfig.build(
            quantity=self.quantity,
            regions=self.regions,
            types=self.types,
            stages=self.stages,
            legend=LegendFlags(**self.legend.model_dump()),
            show_natures=self.show_natures,
            show_genders=self.show_genders,
            alt_forms=self.alt_forms,
            show_stats=self.show_stats,
            generate_moves=self.generate_moves,
            generate_ability=self.generate_ability,
            eviv_mode=self.eviv_mode,
        )


class RosterMember(BaseModel):
    id: int
    name: str
    display_name: Optional[str] = None
    types: List[str] = Field(default_factory=list)
    sprite: str = ""
    ability: Optional[str] = None
    moves: List[str] = Field(default_factory=list)
    nature: Optional[str] = None
    item: Optional[str] = None
    gender: Optional[str] = None
    gender_rate: Optional[int] = None
    evs: Optional[List[int]] = Field(default=None, description="HP/Atk/Def/SpA/SpD/Spe")
    ivs: Optional[List[int]] = Field(default=None, description="HP/Atk/Def/SpA/SpD/Spe")
    lines: List[str] = Field(default_factory=list, description="Card lines for display")

    def to_entry(self) -> RosterEntry:
        return RosterEntry(
            id=self.id,
            name=self.name,
            types=list(self.types),
            sprite=self.sprite,
            ability=self.ability,
            moves=list(self.moves),
            nature=self.nature,
            item=self.item,
            gender=self.gender,
            gender_rate=self.gender_rate,
            evs=tuple(self.evs) if self.evs is not None else None,
            ivs=tuple(self.ivs) if self.ivs is not None else None,
        )


class GenerateResponse(BaseModel):
    roster: List[RosterMember]
    requested: int
    generated: int
    attempts: int
    state: str
    status: str


class ExportRequest(BaseModel):
    roster: List[RosterMember] = Field(default_factory=list)
    options: GenerateOptions = Field(default_factory=GenerateOptions)
    seed: Optional[int] = Field(default=None, description="Seed for the happiness roll")


class OptionsResponse(BaseModel):
    regions: List[str]
    types: List[str]
    stages: List[str]
    natures: List[str]
    eviv_modes: List[str]
    max_quantity: int
