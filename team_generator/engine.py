"""
Rejection-sampling engine that fills a roster from the entity source.

Attempts run one after another. For each candidate the entity and species
lookups run together; the evolution chain is only fetched once the cheaper
filters have passed. Any per-candidate failure just rejects that candidate.
"""

from __future__ import annotations

import asyncio
import logging
import random
from enum import Enum
from typing import List, Optional, Set

from team_generator import constants, filters
from team_generator.errors import FetchFailure
from team_generator.models import GenerationConfig, GenerationResult, RosterEntry
from team_generator.source import EntitySource
from team_generator.stages import compute_stage
from team_generator.synthesis import synthesize_entry

logger = logging.getLogger(__name__)


class EngineState(str, Enum):
    IDLE = "idle"
    SAMPLING = "sampling"
    QUOTA_MET = "quota_met"
    BUDGET_EXHAUSTED = "budget_exhausted"


class RosterSampler:
    def __init__(
        self,
        source: EntitySource,
        rng: Optional[random.Random] = None,
        max_attempts: int = constants.MAX_ATTEMPTS,
        fetch_timeout: float = constants.FETCH_TIMEOUT_SECONDS,
    ) -> None:
        self.source = source
        self.rng = rng or random.Random()
        self.max_attempts = max_attempts
        self.fetch_timeout = fetch_timeout
        self.state = EngineState.IDLE

    async def _call(self, func, *args):
        try:
            return await asyncio.wait_for(asyncio.to_thread(func, *args), timeout=self.fetch_timeout)
        except asyncio.TimeoutError as exc:
            raise FetchFailure(f"Timed out after {self.fetch_timeout}s") from exc

    async def _candidate(
        self,
        entity_id: int,
        config: GenerationConfig,
        type_filters: List[str],
        stage_set: Optional[Set[int]],
    ) -> Optional[RosterEntry]:
        entity, species = await asyncio.gather(
            self._call(self.source.get_entity, entity_id),
            self._call(self.source.get_species, entity_id),
            return_exceptions=True,
        )
        for outcome in (entity, species):
            if isinstance(outcome, BaseException):
                raise outcome

        if not filters.type_matches(entity, type_filters):
            logger.debug("Rejected %s (%s): type filter", entity_id, entity.name)
            return None
        if not filters.legend_matches(entity, species, config.legend):
            logger.debug("Rejected %s (%s): legendary-class filter", entity_id, entity.name)
            return None
        if stage_set is not None:
            if not species.evolution_chain_url:
                raise FetchFailure(f"No evolution chain reference for {species.name}")
            tree = await self._call(self.source.get_evolution_tree, species.evolution_chain_url)
            stage = compute_stage(tree, species.name)
            if not filters.stage_matches(stage, stage_set):
                logger.debug("Rejected %s (%s): stage %s", entity_id, entity.name, stage)
                return None

        return synthesize_entry(entity, species, config, self.rng)

    async def generate(self, config: GenerationConfig) -> GenerationResult:
        """
        Sample until the quota is met or the attempt budget runs out.

        Always returns the (possibly short) roster; candidate failures are
        logged and skipped.
        """
        ranges = filters.resolve_ranges(config.regions)
        type_filters = filters.resolve_type_filter(config.types)
        stage_set = filters.resolve_stage_set(config.stages)

        entries: List[RosterEntry] = []
        seen: Set[int] = set()
        attempts = 0
        self.state = EngineState.SAMPLING

        while len(entries) < config.quantity and attempts < self.max_attempts:
            attempts += 1
            entity_id = filters.draw_identifier(ranges, self.rng)
            if entity_id in seen:
                continue
            seen.add(entity_id)

            try:
                entry = await self._candidate(entity_id, config, type_filters, stage_set)
            except FetchFailure as exc:
                logger.debug("Rejected %s: %s", entity_id, exc)
                continue
            if entry is not None:
                entries.append(entry)

        final_state = EngineState.QUOTA_MET if len(entries) >= config.quantity else EngineState.BUDGET_EXHAUSTED
        result = GenerationResult(
            entries=entries,
            requested=config.quantity,
            attempts=attempts,
            state=final_state.value,
        )
        logger.info("%s [%s]", result.status, final_state.value)
        self.state = EngineState.IDLE
        return result
