"""
Framework-agnostic validation of the BMI form.

Input arrives as the raw text the user typed. Validation stops at the first
failing rule so the UI shows a single message, and a failed validation
always blocks the action before any network call.
"""

from dataclasses import dataclass
from typing import List, Optional, Any, Tuple
import math
import re


HEIGHT_RANGE_M = (0.5, 3.0)
WEIGHT_RANGE_KG = (10.0, 500.0)
AGE_RANGE_YEARS = (1, 120)

# plain decimal text, optional sign and exponent; no digit separators
_NUMBER_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")

MSG_INVALID_ALL = "Please enter valid numbers for all fields."
MSG_INVALID_HEIGHT_WEIGHT = "Please enter valid height and weight."
MSG_NEGATIVE_ALL = "Please enter positive values for all fields."
MSG_NEGATIVE = "Please enter positive values."
MSG_HEIGHT_RANGE = "Please enter a realistic height between 0.5m and 3m."
MSG_WEIGHT_RANGE = "Please enter a realistic weight between 10kg and 500kg."
MSG_AGE_RANGE = "Please enter a realistic age between 1 and 120 years."


class ValidationError:
    """A failed rule and the field it applies to."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class ValidationResult:
    """Represents the result of a validation operation."""

    def __init__(self, is_valid: bool = True, errors: Optional[List[ValidationError]] = None):
        self.is_valid = is_valid
        self.errors = errors or []

    def add_error(self, error: ValidationError) -> None:
        """Add an error to the result."""
        self.errors.append(error)
        self.is_valid = False

    def first_message(self) -> str:
        """Message of the first error, or an empty string when valid."""
        return self.errors[0].message if self.errors else ""


@dataclass(frozen=True)
class ParsedForm:
    """Validated numeric form values."""
    height: float
    weight: float
    age: Optional[int] = None


def _parse_number(raw: Any) -> Optional[float]:
    """Parse user text into a finite float; None when blank or not a number."""
    if raw is None:
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = str(raw).strip()
        if not _NUMBER_RE.fullmatch(text):
            return None
        value = float(text)
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def _parse_age(raw: Any) -> Tuple[bool, Optional[int]]:
    """Return (present, value). Present-but-unparseable yields (True, None)."""
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return False, None
    number = _parse_number(raw)
    if number is None or number != int(number):
        return True, None
    return True, int(number)


class ValidationManager:
    """Range checks for the BMI form.

    Two rule sets exist: saving (`for_save=True` checks age when given and
    uses the "all fields" wording) and calculate-only (age ignored).
    """

    def parse_form(
        self,
        height: Any,
        weight: Any,
        age: Any = None,
        *,
        for_save: bool = True,
        require_age: bool = False,
    ) -> Tuple[ValidationResult, Optional[ParsedForm]]:
        """Validate raw form values.

        Args:
            height: Height text in metres
            weight: Weight text in kilograms
            age: Age text in years (ignored unless `for_save`)
            for_save: Use the save rule set and wording
            require_age: Treat a blank age as invalid when saving

        Returns:
            (ValidationResult, ParsedForm or None when invalid)
        """
        result = ValidationResult()
        invalid_msg = MSG_INVALID_ALL if for_save else MSG_INVALID_HEIGHT_WEIGHT
        negative_msg = MSG_NEGATIVE_ALL if for_save else MSG_NEGATIVE

        height_f = _parse_number(height)
        weight_f = _parse_number(weight)
        age_present, age_i = _parse_age(age) if for_save else (False, None)

        # Zero is treated like a missing value
        if not height_f:
            result.add_error(ValidationError('height', invalid_msg))
        elif not weight_f:
            result.add_error(ValidationError('weight', invalid_msg))
        elif for_save and ((age_present and not age_i) or (require_age and not age_present)):
            result.add_error(ValidationError('age', invalid_msg))
        if not result.is_valid:
            return result, None

        if height_f < 0 or weight_f < 0 or (age_i is not None and age_i < 0):
            field = 'height' if height_f < 0 else ('weight' if weight_f < 0 else 'age')
            result.add_error(ValidationError(field, negative_msg))
            return result, None

        low, high = HEIGHT_RANGE_M
        if height_f < low or height_f > high:
            result.add_error(ValidationError('height', MSG_HEIGHT_RANGE))
            return result, None

        low, high = WEIGHT_RANGE_KG
        if weight_f < low or weight_f > high:
            result.add_error(ValidationError('weight', MSG_WEIGHT_RANGE))
            return result, None

        if age_i is not None:
            low_a, high_a = AGE_RANGE_YEARS
            if age_i < low_a or age_i > high_a:
                result.add_error(ValidationError('age', MSG_AGE_RANGE))
                return result, None

        return result, ParsedForm(height=height_f, weight=weight_f, age=age_i)
