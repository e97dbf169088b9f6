"""Application settings and configuration."""

import os
from pathlib import Path

# Base directory
BASE_DIR = Path(__file__).parent.parent

# Data paths
DATA_DIR = BASE_DIR / "data"
EFFICIENCY_DATA_FILE = Path(
    os.getenv("COSY_EFFICIENCY_DATA_FILE", str(DATA_DIR / "efficiency_records.csv"))
)

# Report/chart output directory
EXPORT_DIR = Path(os.getenv("COSY_EXPORT_DIR", str(DATA_DIR / "exports")))

# Efficiency analysis settings
ANALYSIS_SETTINGS = {
    "hdd_base_temp_c": "15.5",  # °C, heating degree day base
    "min_analysable_days": 3,  # below this a period is flagged as unreliable
    "max_outdoor_divergence_c": "3.0",  # °C gap between periods that weakens the comparison
}

# API settings
API_SETTINGS = {
    "title": "Heat Pump Efficiency API",
    "description": "HDD-normalised heat pump efficiency tracking and before/after comparison",
    "version": "1.0.0",
}

# Logging
LOG_LEVEL = os.getenv("COSY_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
