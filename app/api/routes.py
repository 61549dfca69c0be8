import random
from typing import Iterator, List

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from app.core.config import get_settings
from app.schemas import (
    ExportRequest,
    GenerateOptions,
    GenerateResponse,
    OptionsResponse,
    RosterMember,
)
from team_generator import constants
from team_generator.engine import RosterSampler
from team_generator.errors import EmptyRosterError
from team_generator.models import RosterEntry
from team_generator.presentation import card_lines
from team_generator.showdown import display_name, export_roster
from team_generator.source import EntitySource, PokeAPISource

router = APIRouter()
settings = get_settings()


def get_entity_source() -> Iterator[EntitySource]:
    """Yield a PokeAPI adapter built from settings; its session is closed after the request."""
    with PokeAPISource(
        base_url=settings.pokeapi_base_url,
        timeout=settings.fetch_timeout_seconds,
        allow_network=settings.allow_network,
    ) as source:
        yield source


def _serialize_entries(entries: List[RosterEntry]) -> List[RosterMember]:
    return [
        RosterMember(
            id=entry.id,
            name=entry.name,
            display_name=display_name(entry.name),
            types=entry.types,
            sprite=entry.sprite,
            ability=entry.ability,
            moves=entry.moves,
            nature=entry.nature,
            item=entry.item,
            gender=entry.gender,
            gender_rate=entry.gender_rate,
            evs=list(entry.evs) if entry.evs is not None else None,
            ivs=list(entry.ivs) if entry.ivs is not None else None,
            lines=card_lines(entry),
        )
        for entry in entries
    ]


@router.post("/generate", response_model=GenerateResponse, tags=["roster"])
async def generate_team(
    options: GenerateOptions,
    source: EntitySource = Depends(get_entity_source),
) -> GenerateResponse:
    """Sample a filtered team; a short roster is reported in the status, never as an error."""
    config = options.to_config()
    sampler = RosterSampler(
        source,
        rng=random.Random(options.seed),
        max_attempts=settings.max_attempts,
        fetch_timeout=settings.fetch_timeout_seconds,
    )
    result = await sampler.generate(config)
    return GenerateResponse(
        roster=_serialize_entries(result.entries),
        requested=result.requested,
        generated=result.generated,
        attempts=result.attempts,
        state=result.state,
        status=result.status,
    )


@router.post("/export", response_class=PlainTextResponse, tags=["roster"])
def export_team(request: ExportRequest) -> PlainTextResponse:
    """Return the team-builder text as a downloadable file."""
    entries = [member.to_entry() for member in request.roster]
    try:
        text = export_roster(entries, request.options.to_config(), random.Random(request.seed))
    except EmptyRosterError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return PlainTextResponse(
        text,
        media_type="text/plain; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{constants.EXPORT_FILENAME}"'},
    )


@router.get("/options", response_model=OptionsResponse, tags=["roster"])
def list_options() -> OptionsResponse:
    return OptionsResponse(
        regions=list(constants.REGION_RANGES),
        types=list(constants.TYPES),
        stages=[constants.ANY_STAGE] + list(constants.STAGE_KEYS),
        natures=list(constants.NATURES),
        eviv_modes=list(constants.EVIV_MODES),
        max_quantity=constants.QUANTITY_MAX,
    )
