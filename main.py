"""
AvatarAPI - Entry Point
=======================

Deterministic avatar HTTP service.

Runs in-process when WORKERS is 1, otherwise under the worker supervisor.
"""

import os
import platform
import subprocess
import sys
import uuid
from datetime import datetime
from pathlib import Path

from src.api.config import get_api_config
from src.core import log
from src.core.constants import TIMEZONE_EST
from src.core.exceptions import ConfigurationError
from src.server import WorkerSupervisor, serve_worker


# =============================================================================
# Constants
# =============================================================================

PROJECT_ROOT = Path(__file__).parent
"""Project root directory."""

APP_NAME = "AvatarAPI"
"""Service name for startup logging."""

RUN_ID = uuid.uuid4().hex[:8]
"""Unique identifier for this run (generated once at import time)."""


# =============================================================================
# Startup Helpers
# =============================================================================

def _get_git_commit() -> str:
    """Get the current git commit hash (short form)."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            capture_output=True,
            text=True,
            timeout=5,
            cwd=PROJECT_ROOT,
        )
    except (OSError, subprocess.SubprocessError):
        return "unknown"
    if result.returncode == 0:
        return result.stdout.strip()
    return "unknown"


def _get_start_time() -> str:
    """Get formatted start time in EST."""
    return datetime.now(TIMEZONE_EST).strftime("%Y-%m-%d %H:%M:%S %Z")


def main() -> None:
    """Start the server."""
    try:
        config = get_api_config()
    except ConfigurationError as e:
        log.error("Invalid Configuration", [
            ("Error", str(e)),
            ("Action", "Exiting"),
        ])
        sys.exit(1)

    log.tree(f"{APP_NAME} Starting", [
        ("Run ID", RUN_ID),
        ("Started At", _get_start_time()),
        ("Version", _get_git_commit()),
        ("Host", platform.node()),
        ("PID", str(os.getpid())),
        ("Python", platform.python_version()),
        ("Workers", str(config.workers)),
        ("Cache-Control", f"max-age={config.cache_control}"),
    ], emoji="🚀")

    if config.workers > 1:
        WorkerSupervisor(config).run()
        return

    try:
        serve_worker(config)
    except KeyboardInterrupt:
        log.tree("Keyboard Interrupt", [
            ("Status", "Shutting down gracefully"),
        ], emoji="⌨️")


if __name__ == "__main__":
    main()
