"""
Framework-agnostic business logic for the BMI tracker UI.

Nothing in this package imports a UI framework, so the same state,
validation and actions back both the Streamlit app and the CLI.
"""

from .state_manager import StateManager, TabType, MessageLevel
from .validation_manager import ValidationManager
from .tracker_manager import TrackerManager

__all__ = [
    "StateManager",
    "TabType",
    "MessageLevel",
    "ValidationManager",
    "TrackerManager",
]
