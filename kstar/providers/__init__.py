"""Ready-made node providers."""

from .graph import GraphProvider
from .grid import GridProvider

__all__ = ["GraphProvider", "GridProvider"]
