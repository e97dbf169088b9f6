"""Concrete repository implementations."""

from .file_efficiency_repository import FileEfficiencyRepository

__all__ = [
    "FileEfficiencyRepository",
]
