"""
AvatarAPI - Custom Exceptions
=============================

Custom exception classes for better error handling and categorization.
"""


# =============================================================================
# Base Exceptions
# =============================================================================

class AvatarAPIError(Exception):
    """Base exception for all AvatarAPI errors."""

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


# =============================================================================
# Renderer Exceptions
# =============================================================================

class RendererError(AvatarAPIError):
    """Raised when the avatar renderer cannot produce an image."""
    pass


class UnknownStyleError(RendererError):
    """Raised when no renderer is registered for a style."""
    pass


class InvalidOptionError(RendererError):
    """Raised when a render option has an invalid or out-of-range value."""

    def __init__(self, message: str, option: str = None, value=None, **kwargs):
        if option is not None:
            kwargs.setdefault("option", option)
            kwargs.setdefault("value", value)
        super().__init__(message, kwargs)
        self.option = option
        self.value = value


# =============================================================================
# Configuration Exceptions
# =============================================================================

class ConfigurationError(AvatarAPIError):
    """Base exception for configuration-related errors."""
    pass


class InvalidConfigError(ConfigurationError):
    """Raised when configuration value is invalid."""
    pass
