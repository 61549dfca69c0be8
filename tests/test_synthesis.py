import random

import pytest

from team_generator import constants, synthesis
from team_generator.models import Entity, GenerationConfig, SpeciesMetadata


@pytest.mark.parametrize("seed", range(200))
def test_random_evs_respect_caps(seed: int) -> None:
    evs = synthesis.random_evs(random.Random(seed))
    assert len(evs) == 6
    assert sum(evs) <= constants.EV_TOTAL_MAX
    assert all(0 <= v <= constants.EV_AXIS_MAX for v in evs)


def test_random_evs_spend_whole_budget() -> None:
    # Six axes can hold 1512 points, so the 508 budget is always used up.
    for seed in range(50):
        assert sum(synthesis.random_evs(random.Random(seed))) == constants.EV_TOTAL_MAX


def test_competitive_presets_respect_caps() -> None:
    for preset in constants.COMPETITIVE_EV_PRESETS:
        assert len(preset) == 6
        assert sum(preset) <= constants.EV_TOTAL_MAX
        assert max(preset) <= constants.EV_AXIS_MAX
    assert synthesis.competitive_evs(random.Random(1)) in constants.COMPETITIVE_EV_PRESETS


def test_ivs() -> None:
    assert synthesis.competitive_ivs() == (31, 31, 31, 31, 31, 31)
    for seed in range(50):
        ivs = synthesis.random_ivs(random.Random(seed))
        assert len(ivs) == 6
        assert all(0 <= v <= 31 for v in ivs)


@pytest.mark.parametrize(
    "rate, label",
    [
        (None, "Genderless"),
        (-1, "Genderless"),
        (0, "Male"),
        (8, "Female"),
        (4, "50% Female"),
        (1, "13% Female"),
        (7, "88% Female"),
    ],
)
def test_format_gender(rate, label) -> None:
    assert synthesis.format_gender(rate) == label


def test_pick_moves_small_pool() -> None:
    moves = synthesis.pick_moves(["thunder-shock", "growl"], random.Random(3), 4)
    assert sorted(moves) == ["Growl", "Thunder shock"]


def test_pick_moves_unique_and_capped() -> None:
    pool = ["tackle", "ember", "growl", "scratch", "smokescreen", "slash"]
    for seed in range(30):
        moves = synthesis.pick_moves(pool, random.Random(seed), 4)
        assert len(moves) == 4
        assert len(set(moves)) == 4


def test_pick_moves_empty_pool_falls_back() -> None:
    assert synthesis.pick_moves([], random.Random(0)) == ["Tackle"]


def test_pick_ability() -> None:
    assert synthesis.pick_ability([], random.Random(0)) is None
    assert synthesis.pick_ability(["static", "lightning-rod"], random.Random(0)) in {"static", "lightning-rod"}


def test_humanize() -> None:
    assert synthesis.humanize("solar-power") == "Solar power"
    assert synthesis.humanize("") == ""


def _pikachu():
    entity = Entity(
        id=25,
        name="pikachu",
        types=["electric"],
        abilities=["static"],
        moves=["thunder-shock", "quick-attack", "growl", "tail-whip", "thunderbolt"],
    )
    return entity, SpeciesMetadata(name="pikachu", gender_rate=4)


def test_synthesize_entry_everything_off() -> None:
    entity, species = _pikachu()
    entry = synthesis.synthesize_entry(entity, species, GenerationConfig(), random.Random(0))
    assert entry.ability is None
    assert entry.moves == []
    assert entry.nature is None
    assert entry.item is None
    assert entry.gender is None
    assert entry.evs is None and entry.ivs is None


def test_synthesize_entry_competitive() -> None:
    entity, species = _pikachu()
    config = GenerationConfig.build(
        show_natures=True,
        show_genders=True,
        show_stats=True,
        generate_moves=True,
        generate_ability=True,
        eviv_mode="competitive",
    )
    entry = synthesis.synthesize_entry(entity, species, config, random.Random(0))
    assert entry.ability == "static"
    assert len(entry.moves) == 4
    assert entry.nature in constants.NATURES
    assert entry.item in constants.SAMPLE_ITEMS
    assert entry.gender == "50% Female"
    assert entry.evs in constants.COMPETITIVE_EV_PRESETS
    assert entry.ivs == (31,) * 6


def test_nature_without_stats() -> None:
    entity, species = _pikachu()
    config = GenerationConfig.build(show_natures=True)
    entry = synthesis.synthesize_entry(entity, species, config, random.Random(0))
    assert entry.nature in constants.NATURES
    assert entry.item is None
    assert entry.evs is None


def test_same_seed_same_entry() -> None:
    entity, species = _pikachu()
    config = GenerationConfig.build(show_natures=True, show_stats=True, generate_moves=True)
    first = synthesis.synthesize_entry(entity, species, config, random.Random(42))
    second = synthesis.synthesize_entry(entity, species, config, random.Random(42))
    assert first == second
