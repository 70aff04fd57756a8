"""
AvatarAPI - Constants
=====================

Fixed values shared across the service.
"""

from zoneinfo import ZoneInfo


# =============================================================================
# Timezone
# =============================================================================

TIMEZONE_EST = ZoneInfo("America/New_York")


# =============================================================================
# Time Constants
# =============================================================================

SECONDS_PER_DAY = 86400


# =============================================================================
# Server Defaults
# =============================================================================

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_WORKERS = 1
DEFAULT_CACHE_CONTROL = 365 * SECONDS_PER_DAY  # 1 year
WEBHOOK_TIMEOUT = 5.0


# =============================================================================
# Avatar
# =============================================================================

AVATAR_STYLE = "thumbs"
"""The only style this service renders."""

FORMAT_PARAM = "format"
SEED_PARAM = "seed"


# =============================================================================
# CORS
# =============================================================================

ALLOWED_ROOT_DOMAINS = (
    "shivamdevs.com",
    "dewangan.co",
    "dewangans.com",
)
"""Root domains accepted bare and at any subdomain depth."""
