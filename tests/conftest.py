import sys
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import pytest

# Ensure the project packages are importable when running tests from the repo root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from team_generator import constants  # noqa: E402
from team_generator.errors import FetchFailure, NotFound  # noqa: E402
from team_generator.models import Entity, EvolutionNode, SpeciesMetadata  # noqa: E402

BULBASAUR_CHAIN = "https://pokeapi.test/evolution-chain/1/"
MISSING_CHAIN = "https://pokeapi.test/evolution-chain/missing/"


class FakeSource:
    """In-memory entity source that records every lookup."""

    def __init__(
        self,
        entities: Dict[int, Entity],
        species: Dict[int, SpeciesMetadata],
        trees: Optional[Dict[str, EvolutionNode]] = None,
        failing: Iterable[int] = (),
    ) -> None:
        self.entities = entities
        self.species = species
        self.trees = trees or {}
        self.failing = set(failing)
        self.entity_calls: List[int] = []
        self.species_calls: List[int] = []
        self.tree_calls: List[str] = []

    def get_entity(self, entity_id: int) -> Entity:
        self.entity_calls.append(entity_id)
        if entity_id in self.failing:
            raise FetchFailure(f"boom {entity_id}")
        if entity_id not in self.entities:
            raise NotFound(f"pokemon {entity_id}")
        return self.entities[entity_id]

    def get_species(self, entity_id: int) -> SpeciesMetadata:
        self.species_calls.append(entity_id)
        if entity_id in self.failing:
            raise FetchFailure(f"boom {entity_id}")
        if entity_id not in self.species:
            raise NotFound(f"species {entity_id}")
        return self.species[entity_id]

    def get_evolution_tree(self, ref: str) -> EvolutionNode:
        self.tree_calls.append(ref)
        if ref not in self.trees:
            raise FetchFailure(f"no chain {ref}")
        return self.trees[ref]


def bulbasaur_tree() -> EvolutionNode:
    return EvolutionNode(
        "bulbasaur",
        [EvolutionNode("ivysaur", [EvolutionNode("venusaur")])],
    )


def build_dex(last_id: int = 1010) -> FakeSource:
    """Every identifier resolves; a few named species carry real-ish data."""
    entities: Dict[int, Entity] = {}
    species: Dict[int, SpeciesMetadata] = {}
    for i in range(1, last_id + 1):
        name = f"mon-{i}"
        entities[i] = Entity(
            id=i,
            name=name,
            types=["fire"] if i % 2 else ["water"],
            abilities=["blaze"],
            moves=["tackle", "ember", "growl", "scratch", "smokescreen"],
            sprite=f"https://sprites.test/{i}.png",
        )
        species[i] = SpeciesMetadata(name=name, gender_rate=4, evolution_chain_url=MISSING_CHAIN)

    for i, name in ((1, "bulbasaur"), (2, "ivysaur"), (3, "venusaur")):
        entities[i] = Entity(
            id=i,
            name=name,
            types=["grass", "poison"],
            abilities=["overgrow", "chlorophyll"],
            moves=["vine-whip", "razor-leaf"],
            sprite=f"https://sprites.test/{i}.png",
        )
        species[i] = SpeciesMetadata(name=name, gender_rate=1, evolution_chain_url=BULBASAUR_CHAIN)

    entities[150] = Entity(id=150, name="mewtwo", types=["psychic"], abilities=["pressure"], moves=["psychic"])
    species[150] = SpeciesMetadata(name="mewtwo", is_legendary=True, gender_rate=-1)
    entities[151] = Entity(id=151, name="mew", types=["psychic"], abilities=["synchronize"], moves=[])
    species[151] = SpeciesMetadata(name="mew", is_mythical=True, gender_rate=-1)

    return FakeSource(entities, species, trees={BULBASAUR_CHAIN: bulbasaur_tree()})


@pytest.fixture(name="dex")
def dex_fixture() -> FakeSource:
    return build_dex()


@pytest.fixture(name="tiny_kanto")
def tiny_kanto_fixture(monkeypatch):
    """Shrink Kanto to the first six identifiers so draws are exhaustive."""
    monkeypatch.setitem(constants.REGION_RANGES, "kanto", (1, 6))
    return constants.REGION_RANGES["kanto"]


@pytest.fixture(name="dex_factory")
def dex_factory_fixture():
    return build_dex
