"""
Random Pokémon team generator.

Samples species from PokeAPI under region/type/stage/legendary filters,
synthesizes battle attributes and exports the team in team-builder text.
"""

from .engine import RosterSampler  # noqa: F401
from .models import GenerationConfig, GenerationResult, LegendFlags, RosterEntry  # noqa: F401
from .showdown import export_roster  # noqa: F401
