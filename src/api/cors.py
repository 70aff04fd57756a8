"""
AvatarAPI - CORS Policy
=======================

Origin allow-list as an ordered set of domain rules, plus the Starlette
CORS middleware that consults it.

A denied origin still gets its normal response without any
Access-Control-* headers; the browser enforces the block.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple
from urllib.parse import urlsplit

from starlette.datastructures import Headers, MutableHeaders
from starlette.middleware.cors import CORSMiddleware
from starlette.types import ASGIApp, Message, Send

from src.core.constants import ALLOWED_ROOT_DOMAINS


# =============================================================================
# Rules
# =============================================================================

class MatchType(str, Enum):
    EXACT = "exact"
    SUFFIX = "suffix"


@dataclass(frozen=True)
class AllowListEntry:
    """One domain rule: the bare domain or any of its subdomains."""

    domain: str
    match: MatchType

    def matches(self, hostname: str) -> bool:
        if self.match is MatchType.EXACT:
            return hostname == self.domain
        return hostname.endswith("." + self.domain)


def build_allow_list(domains: Iterable[str] = ALLOWED_ROOT_DOMAINS) -> Tuple[AllowListEntry, ...]:
    """Each root domain accepted bare and at any subdomain depth."""
    entries = []
    for domain in domains:
        entries.append(AllowListEntry(domain.lower(), MatchType.EXACT))
        entries.append(AllowListEntry(domain.lower(), MatchType.SUFFIX))
    return tuple(entries)


# =============================================================================
# Origin Matcher
# =============================================================================

def origin_hostname(origin: str) -> Optional[str]:
    """Hostname of an origin URL, or None when it cannot be parsed."""
    try:
        parts = urlsplit(origin.strip())
        hostname = parts.hostname
        # Raises for non-numeric or out-of-range ports
        parts.port
    except ValueError:
        return None
    return hostname or None


class OriginMatcher:
    """Decides whether a request origin may read responses cross-site."""

    def __init__(self, rules: Optional[Iterable[AllowListEntry]] = None) -> None:
        self._rules = tuple(rules) if rules is not None else build_allow_list()

    @property
    def rules(self) -> Tuple[AllowListEntry, ...]:
        return self._rules

    def allow(self, origin: Optional[str]) -> bool:
        # Browsers always send Origin cross-site; its absence means a
        # same-origin or non-browser caller
        if not origin:
            return True

        hostname = origin_hostname(origin)
        if hostname is None:
            return False

        return any(rule.matches(hostname) for rule in self._rules)


# =============================================================================
# Middleware
# =============================================================================

class AllowListCORSMiddleware(CORSMiddleware):
    """Starlette CORS middleware backed by an OriginMatcher."""

    def __init__(self, app: ASGIApp, matcher: Optional[OriginMatcher] = None, **kwargs) -> None:
        kwargs.setdefault("allow_methods", ["GET"])
        kwargs.setdefault("allow_headers", ["*"])
        kwargs.setdefault("allow_credentials", True)
        # Never "*": allowed origins are echoed back one at a time
        super().__init__(app, allow_origins=(), **kwargs)
        self._matcher = matcher or OriginMatcher()

    def is_allowed_origin(self, origin: str) -> bool:
        return self._matcher.allow(origin)

    async def send(self, message: Message, send: Send, request_headers: Headers) -> None:
        if message["type"] != "http.response.start" or self.is_allowed_origin(
            origin=request_headers["Origin"]
        ):
            await super().send(message, send, request_headers)
            return

        # Denied: no CORS headers at all, only Vary so caches keep origins apart
        message.setdefault("headers", [])
        MutableHeaders(scope=message).add_vary_header("Origin")
        await send(message)


__all__ = [
    "AllowListCORSMiddleware",
    "AllowListEntry",
    "MatchType",
    "OriginMatcher",
    "build_allow_list",
    "origin_hostname",
]
