from __future__ import annotations

"""
BMI computation and classification.

BMI = weight_kg / (height_m)²

Everything in this module is pure: no I/O, no UI framework imports, no
logging. Range validation of user input happens upstream in
`bmi_tracker.ui_logic.validation_manager`.
"""

from dataclasses import dataclass
from typing import List, Tuple

DEFAULT_DECIMALS = 2

UNDERWEIGHT_LIMIT = 18.5
NORMAL_LIMIT = 25.0
OVERWEIGHT_LIMIT = 30.0


@dataclass(frozen=True)
class BmiClassification:
    """Category bucket for a BMI value, with display colour and advice text."""

    category: str
    color: str
    advice: str


UNDERWEIGHT = BmiClassification(
    category="Underweight",
    color="#3b82f6",
    advice="Consider consulting a healthcare provider about healthy weight gain strategies.",
)
NORMAL_WEIGHT = BmiClassification(
    category="Normal weight",
    color="#10b981",
    advice="Great! You are in the healthy weight range. Maintain your current lifestyle.",
)
OVERWEIGHT = BmiClassification(
    category="Overweight",
    color="#f59e0b",
    advice="Consider adopting healthier eating habits and increasing physical activity.",
)
OBESE = BmiClassification(
    category="Obese",
    color="#ef4444",
    advice="Please consult with a healthcare provider about weight management strategies.",
)

# Legend rows for the scale reference: (label, range text, colour)
BMI_SCALE: List[Tuple[str, str, str]] = [
    ("Underweight", "<18.5", UNDERWEIGHT.color),
    ("Normal", "18.5-24.9", NORMAL_WEIGHT.color),
    ("Overweight", "25-29.9", OVERWEIGHT.color),
    ("Obese", "≥30", OBESE.color),
]


def compute_bmi(height: float, weight: float, decimals: int = DEFAULT_DECIMALS) -> float:
    """Calculate BMI from height (m) and weight (kg).

    Args:
        height: Height in metres, positive
        weight: Weight in kilograms, positive
        decimals: Number of decimal places to round to

    Returns:
        BMI value rounded to `decimals` places

    Examples:
        >>> compute_bmi(1.75, 70)
        22.86
        >>> compute_bmi(1.60, 90, decimals=1)
        35.2
    """
    height_f = float(height)
    if height_f == 0:
        raise ValueError("height must be non-zero")
    return round(float(weight) / (height_f * height_f), decimals)


def classify(bmi: float) -> BmiClassification:
    """Map a BMI value onto its bucket.

    Bins are left-inclusive / right-exclusive, so 18.5 is Normal weight,
    25.0 is Overweight and 30.0 is Obese.
    """
    if bmi < UNDERWEIGHT_LIMIT:
        return UNDERWEIGHT
    if bmi < NORMAL_LIMIT:
        return NORMAL_WEIGHT
    if bmi < OVERWEIGHT_LIMIT:
        return OVERWEIGHT
    return OBESE


__all__ = [
    "BMI_SCALE",
    "BmiClassification",
    "DEFAULT_DECIMALS",
    "NORMAL_WEIGHT",
    "OBESE",
    "OVERWEIGHT",
    "UNDERWEIGHT",
    "classify",
    "compute_bmi",
]
