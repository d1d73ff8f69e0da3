"""
Service Layer Exceptions

Custom exceptions for the session lifecycle and related orchestration logic.
"""


class VersionNotFoundError(Exception):
    """Raised when the version metadata cannot be fetched or is invalid."""
    pass


class InitializationError(Exception):
    """Raised when a turn cannot be initialized. Fatal for the turn."""
    pass
