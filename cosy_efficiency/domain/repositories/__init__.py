"""Repository interfaces."""

from .efficiency_repository import EfficiencyRepository

__all__ = [
    "EfficiencyRepository",
]
