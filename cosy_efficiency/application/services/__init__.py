"""Application services."""

from .efficiency_analyzer_service import EfficiencyAnalyzerService

__all__ = ["EfficiencyAnalyzerService"]
