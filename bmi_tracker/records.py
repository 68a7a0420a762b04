from __future__ import annotations

"""
BMI record model and its translations.

A `BmiRecord` is immutable. The `bmi` field is derived from height and
weight whenever both are usable, both for records created locally and for
records read back from the API. JSON uses the API's camelCase `createdAt`.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, List, Optional
import logging
import math

import pandas as pd

from .bmi_engine import DEFAULT_DECIMALS, classify, compute_bmi

logger = logging.getLogger(__name__)

DATAFRAME_COLUMNS = ["id", "createdAt", "height", "weight", "age", "bmi", "category", "advice"]


@dataclass(frozen=True)
class BmiRecord:
    """A single BMI measurement.

    Attributes:
        height: Height in metres
        weight: Weight in kilograms
        age: Age in years, None when not supplied
        bmi: weight / height², rounded
        created_at: Creation time (timezone-aware where known)
        id: Identifier assigned by the API; None for unsaved records
    """

    height: float
    weight: float
    age: Optional[int]
    bmi: float
    created_at: Optional[datetime] = None
    id: Optional[str] = None

    @classmethod
    def create(
        cls,
        height: float,
        weight: float,
        age: Optional[int] = None,
        *,
        decimals: int = DEFAULT_DECIMALS,
        now: Optional[datetime] = None,
    ) -> "BmiRecord":
        """Build a new, unsaved record stamped with the current UTC time."""
        return cls(
            height=float(height),
            weight=float(weight),
            age=int(age) if age is not None else None,
            bmi=compute_bmi(height, weight, decimals),
            created_at=now or datetime.now(timezone.utc),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any], *, decimals: int = DEFAULT_DECIMALS) -> "BmiRecord":
        """Build a record from an API JSON object.

        BMI is re-derived from height/weight when both are positive numbers;
        the stored value is only used as a fallback.
        """
        if not isinstance(data, dict):
            raise ValueError(f"BMI record must be an object, got {type(data).__name__}")

        height = _as_float(data.get("height"))
        weight = _as_float(data.get("weight"))
        stored_bmi = _as_float(data.get("bmi"))

        if height > 0 and weight > 0:
            bmi = compute_bmi(height, weight, decimals)
            if not math.isnan(stored_bmi) and abs(stored_bmi - bmi) > 0.1:
                logger.warning(
                    "Stored BMI %.2f for record %s disagrees with derived %.2f; using derived value",
                    stored_bmi,
                    data.get("id"),
                    bmi,
                )
        elif not math.isnan(stored_bmi):
            bmi = stored_bmi
        else:
            raise ValueError("BMI record has neither usable height/weight nor a bmi value")

        raw_id = data.get("id", data.get("_id"))
        return cls(
            height=height,
            weight=weight,
            age=_as_optional_int(data.get("age")),
            bmi=bmi,
            created_at=parse_timestamp(data.get("createdAt")),
            id=str(raw_id) if raw_id not in (None, "") else None,
        )

    def to_payload(self) -> Dict[str, Any]:
        """JSON body for `POST /api/create/bmi`."""
        return {
            "height": self.height,
            "weight": self.weight,
            "age": self.age,
            "bmi": self.bmi,
            "createdAt": format_timestamp(self.created_at),
        }

    def to_dict(self) -> Dict[str, Any]:
        """Full representation including id, category and advice."""
        out = self.to_payload()
        out["id"] = self.id
        classification = classify(self.bmi)
        out["category"] = classification.category
        out["advice"] = classification.advice
        return out


def _as_float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return float("nan")


def _as_optional_int(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return None


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp as produced by JavaScript's `toISOString`."""
    if not value or not isinstance(value, str):
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        logger.debug("Unparseable createdAt value: %r", value)
        return None


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    """Format as `YYYY-MM-DDTHH:MM:SS.mmmZ` for UTC values, ISO-8601 otherwise."""
    if value is None:
        return None
    if value.tzinfo is not None and value.utcoffset() == timedelta(0):
        return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
    return value.isoformat()


def records_from_json(items: Iterable[Any], *, decimals: int = DEFAULT_DECIMALS) -> List[BmiRecord]:
    """Convert a JSON array into records, skipping entries that cannot be used."""
    out: List[BmiRecord] = []
    for item in items:
        try:
            out.append(BmiRecord.from_dict(item, decimals=decimals))
        except ValueError as e:
            logger.warning("Skipping malformed BMI record: %s", e)
    return out


def records_to_dataframe(records: Iterable[BmiRecord]) -> pd.DataFrame:
    """Tabular view of records, oldest first.

    `createdAt` becomes a pandas datetime column; records without a timestamp
    sort last.
    """
    rows = [r.to_dict() for r in records]
    df = pd.DataFrame(rows, columns=DATAFRAME_COLUMNS)
    if df.empty:
        return df
    df["createdAt"] = pd.to_datetime(df["createdAt"], utc=True, errors="coerce", format="ISO8601")
    df = df.sort_values("createdAt", na_position="last", kind="stable").reset_index(drop=True)
    return df


__all__ = [
    "BmiRecord",
    "DATAFRAME_COLUMNS",
    "format_timestamp",
    "parse_timestamp",
    "records_from_json",
    "records_to_dataframe",
]
