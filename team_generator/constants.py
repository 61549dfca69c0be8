from __future__ import annotations

# Inclusive national-dex identifier ranges per region.
REGION_RANGES: dict[str, tuple[int, int]] = {
    "all": (1, 1010),
    "kanto": (1, 151),
    "johto": (152, 251),
    "hoenn": (252, 386),
    "sinnoh": (387, 493),
    "unova": (494, 649),
    "kalos": (650, 721),
    "alola": (722, 809),
    "galar": (810, 898),
    "hisui": (899, 905),
    "paldea": (906, 1010),
}

TYPES: list[str] = [
    "normal",
    "fire",
    "water",
    "electric",
    "grass",
    "ice",
    "fighting",
    "poison",
    "ground",
    "flying",
    "psychic",
    "bug",
    "rock",
    "ghost",
    "dragon",
    "dark",
    "steel",
    "fairy",
]

# Stage dropdown keys mapped to evolutionary depth.
STAGE_KEYS: dict[str, int] = {
    "unevolved": 1,
    "evolvedOnce": 2,
    "evolvedTwice": 3,
}
ANY_STAGE = "any"
ALL_SENTINEL = "all"

NATURES: list[str] = [
    "Hardy", "Lonely", "Brave", "Adamant", "Naughty",
    "Bold", "Docile", "Relaxed", "Impish", "Lax",
    "Timid", "Hasty", "Serious", "Jolly", "Naive",
    "Modest", "Mild", "Quiet", "Bashful", "Rash",
    "Calm", "Gentle", "Sassy", "Careful", "Quirky",
]

SAMPLE_ITEMS: list[str] = [
    "Leftovers",
    "Choice Band",
    "Life Orb",
    "Focus Sash",
    "Choice Specs",
    "Assault Vest",
    "Aguav Berry",
    "Expert Belt",
    "Sitrus Berry",
    "Mystic Water",
    "Black Sludge",
]

# Order: HP / Atk / Def / SpA / SpD / Spe
STAT_LABELS: tuple[str, ...] = ("HP", "Atk", "Def", "SpA", "SpD", "Spe")
STAT_COUNT = len(STAT_LABELS)

EV_AXIS_MAX = 252
EV_TOTAL_MAX = 508
IV_MAX = 31

COMPETITIVE_EV_PRESETS: list[tuple[int, ...]] = [
    (0, 252, 4, 0, 0, 252),
    (252, 0, 252, 0, 4, 0),
    (0, 0, 0, 252, 4, 252),
    (4, 252, 0, 0, 0, 252),
    (252, 0, 0, 252, 0, 4),
]

EVIV_COMPETITIVE = "competitive"
EVIV_RANDOM = "random"
EVIV_MODES = (EVIV_COMPETITIVE, EVIV_RANDOM)

QUANTITY_MIN = 1
QUANTITY_MAX = 6
QUANTITY_DEFAULT = 3

MAX_ATTEMPTS = 700
MOVE_PICK_CEILING = 300
FETCH_TIMEOUT_SECONDS = 12.0

FALLBACK_MOVE = "Tackle"
EXPORT_FALLBACK_MOVES: tuple[str, ...] = ("Tackle", "Protect", "Growl", "Struggle")
EXPORT_LEVEL = 63
HAPPINESS_MAX = 255
EXPORT_FILENAME = "team-showdown.txt"

POKEAPI_BASE_URL = "https://pokeapi.co/api/v2"
