"""
AvatarAPI - Avatar Router
=========================

GET /{seed} and GET /{seed}/{path...}. Every path segment becomes part
of the seed; query parameters become render options.
"""

from typing import Dict, List

from fastapi import APIRouter, Request, Response

from src.avatar.responder import AvatarRequest, AvatarResponder
from src.avatar.seed import split_tail


router = APIRouter(tags=["Avatar"])


def _raw_query(request: Request) -> Dict[str, List[str]]:
    """Query parameters as key -> values, in request order."""
    raw: Dict[str, List[str]] = {}
    for key, value in request.query_params.multi_items():
        raw.setdefault(key, []).append(value)
    return raw


def _respond(request: Request, seed: str, tail: str) -> Response:
    responder: AvatarResponder = request.app.state.responder

    avatar = responder.respond(AvatarRequest(
        seed_head=seed,
        seed_tail=split_tail(tail),
        raw_query=_raw_query(request),
        origin=request.headers.get("origin"),
    ))

    return Response(
        content=avatar.body,
        status_code=avatar.status,
        media_type=avatar.media_type,
        headers=avatar.headers,
    )


@router.get("/{seed}/{tail:path}")
def get_avatar_path(request: Request, seed: str, tail: str) -> Response:
    """Avatar for a multi-segment seed (/user/john/doe -> "user/john/doe")."""
    return _respond(request, seed, tail)


@router.get("/{seed}")
def get_avatar(request: Request, seed: str) -> Response:
    """Avatar for a single-segment seed."""
    return _respond(request, seed, "")


__all__ = ["router"]
