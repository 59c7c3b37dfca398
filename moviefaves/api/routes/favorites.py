"""Favorites list and append (stored in JSON)."""
import logging
from typing import Any, Mapping

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field, ValidationError
from starlette.concurrency import run_in_threadpool

from moviefaves.api.state import AppState, get_state
from moviefaves.models.favorite import FavoriteRecord

logger = logging.getLogger(__name__)

router = APIRouter()

# Body returned for a POST missing name or oid
ERROR_BODY = "Error"


class FavoriteBody(BaseModel):
    name: str = Field(min_length=1)
    oid: str = Field(min_length=1)


def _favorite_to_dict(f: FavoriteRecord) -> dict:
    return {"name": f.name, "oid": f.oid}


async def _read_body(request: Request) -> Mapping[str, Any]:
    """Accept JSON or form-encoded bodies; anything unparseable counts as empty."""
    content_type = request.headers.get("content-type", "")
    try:
        if content_type.startswith("application/json"):
            body = await request.json()
        else:
            body = await request.form()
    except ValueError:
        return {}
    return body if isinstance(body, Mapping) else {}


@router.get("")
def list_favorites(state: AppState = Depends(get_state)):
    """List all favorites in the order they were added."""
    return [_favorite_to_dict(f) for f in state.get_favorites()]


@router.post("")
async def create_favorite(request: Request, state: AppState = Depends(get_state)):
    """Append a favorite. Returns the whole updated collection; the new record is last."""
    body = await _read_body(request)
    try:
        favorite = FavoriteBody.model_validate(dict(body))
    except ValidationError as e:
        logger.warning("Rejected favorite %r: %d validation error(s)", dict(body), e.error_count())
        return PlainTextResponse(ERROR_BODY, status_code=400)
    favorites = await run_in_threadpool(state.add_favorite, favorite.name, favorite.oid)
    return [_favorite_to_dict(f) for f in favorites]
