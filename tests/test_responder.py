"""Tests for the avatar responder with a stub renderer."""

import json

import pytest

from src.avatar.responder import AvatarRequest, AvatarResponder, OutputFormat
from src.core.exceptions import RendererError


class FailingRenderer:
    def render(self, style, options):
        raise RendererError("bad option", {"option": "rotate"})


@pytest.fixture
def stub(recording_renderer):
    return recording_renderer


@pytest.fixture
def responder(stub):
    return AvatarResponder(renderer=stub, cache_control=600)


def test_svg_response(responder, stub):
    response = responder.respond(AvatarRequest(seed_head="user", seed_tail=["john"]))

    assert response.status == 200
    assert response.media_type == "image/svg+xml"
    assert response.body == "<svg>user/john</svg>"
    assert response.headers["Content-Disposition"] == 'inline; filename="avatar.svg"'
    assert response.headers["Cache-Control"] == "max-age=600"
    assert response.headers["X-Robots-Tag"] == "noindex"
    assert stub.calls == [("thumbs", {"seed": "user/john"})]


def test_json_response(responder):
    response = responder.respond(AvatarRequest(seed_head="test", raw_query={"format": ["json"]}))

    assert response.media_type == "application/json"
    assert response.headers["Content-Disposition"] == 'inline; filename="avatar.json"'
    assert json.loads(response.body) == {"svg": "<svg>test</svg>", "extra": {"seed": "test"}}


def test_format_and_seed_never_forwarded_from_query(responder, stub):
    responder.respond(AvatarRequest(
        seed_head="path-seed",
        raw_query={"format": ["json"], "seed": ["query-seed"], "size": ["64"], "x": ["1", "2"]},
    ))

    _, options = stub.calls[0]
    assert options == {"seed": "path-seed", "size": "64", "x": ["1", "2"]}


def test_renderer_failure_propagates():
    responder = AvatarResponder(renderer=FailingRenderer(), cache_control=60)

    with pytest.raises(RendererError):
        responder.respond(AvatarRequest(seed_head="test"))


@pytest.mark.parametrize("raw_query, expected", [
    ({}, OutputFormat.SVG),
    ({"format": ["json"]}, OutputFormat.JSON),
    ({"format": ["svg"]}, OutputFormat.SVG),
    ({"format": ["JSON"]}, OutputFormat.SVG),
    ({"format": ["json", "json"]}, OutputFormat.SVG),
    ({"format": [""]}, OutputFormat.SVG),
])
def test_output_format(raw_query, expected):
    assert OutputFormat.from_query(raw_query) is expected
