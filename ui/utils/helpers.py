from __future__ import annotations

"""General-purpose display helpers for the UI."""

from datetime import datetime
from typing import Optional

from bmi_tracker.ui_logic.state_manager import MessageLevel

_MESSAGE_ICONS = {
    MessageLevel.SUCCESS: "✅",
    MessageLevel.ERROR: "❌",
    MessageLevel.INFO: "ℹ️",
}


def format_record_date(value: Optional[datetime]) -> str:
    """Format a record timestamp like `Jan 5, 2025`; `N/A` when missing."""
    if value is None:
        return "N/A"
    return f"{value.strftime('%b')} {value.day}, {value.year}"


def message_icon(level: MessageLevel) -> str:
    return _MESSAGE_ICONS.get(level, "")


def format_measure(value: Optional[float], unit: str) -> str:
    """Render a measurement with its unit, trimming trailing zeros."""
    if value is None:
        return "N/A"
    return f"{value:g}{unit}"
