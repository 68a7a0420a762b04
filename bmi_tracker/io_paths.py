from __future__ import annotations

"""Centralized path utilities for the project.

These provide absolute `Path` objects to key directories, avoiding
hard-coded relative paths throughout the codebase.
"""

from pathlib import Path


# The `bmi_tracker` package is one level below the project root
PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Canonical directories used throughout the project
CONFIG_DIR = PROJECT_ROOT / "config"
OUTPUT_DIR = PROJECT_ROOT / "output"
LOGS_DIR = PROJECT_ROOT / "logs"

DEFAULT_CONFIG_FILE = CONFIG_DIR / "settings.yaml"
