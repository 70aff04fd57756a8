"""HTTP tests for the avatar endpoints."""

import json
import re

import pytest
from fastapi.testclient import TestClient

from src.api.app import create_app
from src.api.config import APIConfig


@pytest.mark.parametrize("path", [
    "/test",
    "/john-doe",
    "/user/john",
    "/user/john/doe",
    "/test?size=128",
    "/test?flip=true",
    "/test?rotate=45",
])
def test_svg_routes(client, api_config, path):
    response = client.get(path)

    assert response.status_code == 200
    assert re.search(r"image/svg\+xml", response.headers["content-type"])
    assert "<svg" in response.text
    assert "</svg>" in response.text
    assert response.headers["cache-control"] == f"max-age={api_config.cache_control}"
    assert response.headers["x-robots-tag"] == "noindex"
    assert response.headers["content-disposition"] == 'inline; filename="avatar.svg"'


@pytest.mark.parametrize("path", [
    "/test?format=json",
    "/user/john?format=json",
    "/alice/bob?format=json&size=64",
])
def test_json_routes(client, path):
    response = client.get(path)

    assert response.status_code == 200
    assert "application/json" in response.headers["content-type"]
    assert response.headers["content-disposition"] == 'inline; filename="avatar.json"'
    data = json.loads(response.text)
    assert data["svg"].startswith("<svg")
    assert data["extra"]
    assert response.headers["x-robots-tag"] == "noindex"


def test_other_format_values_give_svg(client):
    response = client.get("/test?format=png")

    assert response.status_code == 200
    assert "image/svg+xml" in response.headers["content-type"]


def test_same_seed_same_avatar(client):
    first = client.get("/consistent-seed")
    second = client.get("/consistent-seed")

    assert first.status_code == second.status_code == 200
    assert first.text == second.text


def test_different_seeds_different_avatars(client):
    assert client.get("/seed-one").text != client.get("/seed-two").text


def test_multi_segment_differs_from_single(client):
    assert client.get("/test").text != client.get("/test/123").text


def test_empty_wildcard_matches_single_segment(client):
    assert client.get("/test/").text == client.get("/test").text


def test_json_svg_matches_svg_output(client):
    svg = client.get("/user/john").text
    data = client.get("/user/john?format=json").json()

    assert data["svg"] == svg


def test_size_option_applied(client):
    response = client.get("/test?size=64")
    assert 'width="64"' in response.text


def test_invalid_option_is_server_error(client):
    response = client.get("/test?rotate=abc")

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "message": "Internal server error",
        "data": None,
    }


def test_out_of_range_option_is_server_error(client):
    assert client.get("/test?size=0").status_code == 500


def test_unknown_options_ignored(client):
    assert client.get("/test?whatever=1").text == client.get("/test").text


def test_post_not_allowed(client):
    assert client.post("/test").status_code == 405


def test_root_not_found(client):
    assert client.get("/").status_code == 404


def test_request_logging_adds_request_id():
    app = create_app(config=APIConfig(logger=True))

    with TestClient(app) as client:
        response = client.get("/test")

    assert response.status_code == 200
    assert len(response.headers["x-request-id"]) == 8


def test_repeated_query_keys_reach_renderer_as_list(api_config, recording_renderer):
    renderer = recording_renderer
    app = create_app(config=api_config, renderer=renderer)

    with TestClient(app) as client:
        response = client.get(
            "/user/john?backgroundColor=aaaaaa&backgroundColor=bbbbbb&size=64&format=json"
        )

    assert response.status_code == 200
    assert renderer.calls == [("thumbs", {
        "backgroundColor": ["aaaaaa", "bbbbbb"],
        "size": "64",
        "seed": "user/john",
    })]
