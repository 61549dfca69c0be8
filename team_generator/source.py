"""
Entity source adapter backed by PokeAPI.

Three read operations are exposed: base entity data, species metadata and the
evolution chain. Every transport problem surfaces as ``FetchFailure`` (or
``NotFound`` for a 404) so the sampler can treat it as a rejected candidate.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Protocol

import requests

from team_generator import constants
from team_generator.errors import FetchFailure, NotFound
from team_generator.models import Entity, EvolutionNode, SpeciesMetadata

logger = logging.getLogger(__name__)

HEADERS = {"User-Agent": "Mozilla/5.0 (compatible; pokemon-team-randomizer/1.0)"}


class EntitySource(Protocol):
    def get_entity(self, entity_id: int) -> Entity: ...

    def get_species(self, entity_id: int) -> SpeciesMetadata: ...

    def get_evolution_tree(self, ref: str) -> EvolutionNode: ...


def _sprite_url(sprites: Optional[Dict[str, Any]]) -> str:
    if not isinstance(sprites, dict):
        return ""
    artwork = (sprites.get("other") or {}).get("official-artwork") or {}
    return artwork.get("front_default") or sprites.get("front_default") or ""


def _named(entry: Any, key: str) -> Optional[str]:
    """Pull ``entry[key]["name"]`` out of PokeAPI's nested resource lists."""
    if isinstance(entry, str):
        return entry
    if not isinstance(entry, dict):
        return None
    inner = entry.get(key)
    if isinstance(inner, dict):
        return inner.get("name")
    return entry.get("name")


def parse_entity(data: Dict[str, Any]) -> Entity:
    types = [name for name in (_named(t, "type") for t in data.get("types") or []) if name]
    abilities = [name for name in (_named(a, "ability") for a in data.get("abilities") or []) if name]
    moves = [name for name in (_named(m, "move") for m in data.get("moves") or []) if name]
    return Entity(
        id=int(data.get("id", 0)),
        name=data.get("name") or "",
        types=types,
        abilities=abilities,
        moves=moves,
        sprite=_sprite_url(data.get("sprites")),
    )


def parse_species(data: Dict[str, Any]) -> SpeciesMetadata:
    chain = data.get("evolution_chain") or {}
    gender_rate = data.get("gender_rate")
    return SpeciesMetadata(
        name=data.get("name") or "",
        is_legendary=bool(data.get("is_legendary")),
        is_mythical=bool(data.get("is_mythical")),
        gender_rate=int(gender_rate) if gender_rate is not None else None,
        evolution_chain_url=chain.get("url") if isinstance(chain, dict) else None,
    )


def parse_evolution_node(node: Dict[str, Any]) -> EvolutionNode:
    species = node.get("species") or {}
    return EvolutionNode(
        name=species.get("name") or "",
        evolves_to=[parse_evolution_node(child) for child in node.get("evolves_to") or []],
    )


class PokeAPISource:
    """Blocking PokeAPI client; one shared ``requests.Session`` per instance."""

    def __init__(
        self,
        base_url: str = constants.POKEAPI_BASE_URL,
        timeout: float = constants.FETCH_TIMEOUT_SECONDS,
        allow_network: bool = True,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.allow_network = allow_network
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.session.headers.update(HEADERS)

    def close(self) -> None:
        """Close the underlying session if this instance created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "PokeAPISource":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _fetch_json(self, url: str, label: str) -> Dict[str, Any]:
        if not self.allow_network:
            raise FetchFailure(f"Network fetch disabled for {label}: {url}")

        logger.debug("Requesting %s: %s", label, url)
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise FetchFailure(f"Failed to fetch {label}: {exc}") from exc

        if resp.status_code == 404:
            raise NotFound(f"No {label} at {url}")
        if not resp.ok:
            raise FetchFailure(f"Failed to fetch {label}: HTTP {resp.status_code}")
        try:
            return resp.json()
        except ValueError as exc:
            raise FetchFailure(f"Could not parse {label} JSON: {exc}") from exc

    def _parse(self, parser, data: Dict[str, Any], label: str):
        try:
            return parser(data)
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise FetchFailure(f"Malformed {label} payload: {exc}") from exc

    def get_entity(self, entity_id: int) -> Entity:
        label = f"pokemon {entity_id}"
        data = self._fetch_json(f"{self.base_url}/pokemon/{entity_id}/", label)
        return self._parse(parse_entity, data, label)

    def get_species(self, entity_id: int) -> SpeciesMetadata:
        label = f"species {entity_id}"
        data = self._fetch_json(f"{self.base_url}/pokemon-species/{entity_id}/", label)
        return self._parse(parse_species, data, label)

    def get_evolution_tree(self, ref: str) -> EvolutionNode:
        data = self._fetch_json(ref, "evolution chain")
        chain = data.get("chain") if isinstance(data, dict) else None
        if not isinstance(chain, dict):
            raise FetchFailure(f"Evolution chain payload has no chain: {ref}")
        return self._parse(parse_evolution_node, chain, "evolution chain")
