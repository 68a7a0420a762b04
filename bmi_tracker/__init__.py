"""BMI tracker source package.

Exports the BMI engine and record model for convenient imports.
"""

from .bmi_engine import BMI_SCALE, BmiClassification, classify, compute_bmi
from .errors import ApiError, BmiTrackerError, ConfigError
from .records import BmiRecord

__all__ = [
    "BMI_SCALE",
    "BmiClassification",
    "classify",
    "compute_bmi",
    "ApiError",
    "BmiTrackerError",
    "ConfigError",
    "BmiRecord",
]

__version__ = "1.0.0"
