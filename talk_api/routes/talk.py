"""The conversation starter query endpoint."""

import logging
from typing import Union

from fastapi import APIRouter, Request, Response

from talk_engine import SelectionError, select_point

from ..models import ErrorResponse, PointResponse
from ..services import new_session_id
from ..state import get_state

logger = logging.getLogger(__name__)

router = APIRouter()


def _session_id(request: Request, response: Response, cookie_name: str) -> str:
    """Session id from the cookie; a fresh one is issued on first contact."""
    session_id = request.cookies.get(cookie_name)
    if not session_id:
        session_id = new_session_id()
        response.set_cookie(cookie_name, session_id, httponly=True, samesite="lax")
        logger.info("[talk] new session %s", session_id[:8])
    return session_id


@router.get("/api/", response_model=Union[PointResponse, ErrorResponse], response_model_exclude_none=True)
@router.get("/api", include_in_schema=False)
def talk(request: Request, response: Response):
    """
    Serve one conversation starter for the query dialect, e.g.
    ?talk, ?c=3, ?c=1&2, ?c=3&&p=4&7, ?mc=yes&&c1=2&&c2=5&1&3, ?search=space|ocean.

    Always 200; domain failures come back as {"error": "..."}.
    """
    state = get_state()
    session_id = _session_id(request, response, state.config.session_cookie)
    raw_query = request.url.query
    try:
        point = select_point(
            raw_query,
            state.assembler,
            state.sampler,
            state.session_store.history(session_id),
        )
    except SelectionError as e:
        logger.info("[talk] %s -> %s", raw_query or "<empty>", e.kind.value)
        return e.to_payload()
    logger.debug("[talk] %s -> %s-%s", raw_query, point.category_id, point.id)
    return point.to_payload()
