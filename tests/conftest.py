"""
Shared pytest fixtures.

Logs go to a temporary directory so test runs do not write into the
project's logs/ folder.
"""

import os
import tempfile

os.environ.setdefault("AVATAR_LOGS_DIR", tempfile.mkdtemp(prefix="avatar-api-logs-"))

import pytest
from fastapi.testclient import TestClient

from src.api.app import create_app
from src.api.config import APIConfig
from src.avatar.renderer import LocalRenderer, RenderResult


CACHE_SECONDS = 86400


class RecordingRenderer:
    """Stub renderer that remembers what it was asked to draw."""

    def __init__(self):
        self.calls = []

    def render(self, style, options):
        self.calls.append((style, dict(options)))
        return RenderResult(svg=f"<svg>{options['seed']}</svg>", extra={"seed": options["seed"]})


@pytest.fixture
def api_config():
    return APIConfig(cache_control=CACHE_SECONDS)


@pytest.fixture
def renderer():
    return LocalRenderer()


@pytest.fixture
def recording_renderer():
    return RecordingRenderer()


@pytest.fixture
def app(api_config, renderer):
    return create_app(config=api_config, renderer=renderer)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
