"""Heat pump efficiency tracking and HDD-normalised analysis."""

__version__ = "1.0.0"
