"""Exception types raised by the search engine."""

from __future__ import annotations


class PathfindingError(Exception):
    """Base error for pathfinding failures."""


class ProviderContractError(PathfindingError, ValueError):
    """Raised when a node provider returns data that breaks its contract."""


class SessionStateError(PathfindingError, RuntimeError):
    """Raised when a search session is driven in an invalid way."""


__all__ = ["PathfindingError", "ProviderContractError", "SessionStateError"]
