"""
Framework-agnostic state management for the BMI tracker UI.

This module provides reactive state management that can be used by any UI framework.
It holds the form inputs, the last computed result, the loaded history, the
user-facing message and the loading (busy) flag.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Callable
from enum import Enum
import logging

from bmi_tracker.bmi_engine import BmiClassification
from bmi_tracker.records import BmiRecord

logger = logging.getLogger(__name__)


class TabType(Enum):
    """Enumeration of available tabs in the application."""
    CALCULATOR = "calculator"
    HISTORY = "history"


class MessageLevel(Enum):
    """How the current message should be presented."""
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclass
class FormState:
    """Raw text typed into the form fields."""
    height: str = ""
    weight: str = ""
    age: str = ""


@dataclass
class ResultState:
    """Last computed BMI and its classification."""
    bmi: Optional[float] = None
    classification: Optional[BmiClassification] = None


@dataclass
class HistoryState:
    """Records loaded from the API."""
    records: List[BmiRecord] = field(default_factory=list)
    loaded: bool = False


@dataclass
class UIState:
    """Aggregate UI state for the entire application."""
    active_tab: TabType = TabType.CALCULATOR
    form: FormState = field(default_factory=FormState)
    result: ResultState = field(default_factory=ResultState)
    history: HistoryState = field(default_factory=HistoryState)
    message: str = ""
    message_level: MessageLevel = MessageLevel.INFO
    loading: bool = False


class StateManager:
    """
    Framework-agnostic state manager with reactive patterns.

    Every update replaces the `UIState` object and notifies `state_changed`
    listeners with `(old_state, new_state)`.
    """

    def __init__(self):
        """Initialize the state manager with default state."""
        self._state = UIState()
        self._listeners: Dict[str, List[Callable]] = {}

    def get_state(self) -> UIState:
        """Get the current application state."""
        return self._state

    def set_state(self, new_state: UIState) -> None:
        """Set the entire application state and notify listeners."""
        old_state = self._state
        self._state = new_state

        self._notify_listeners("state_changed", old_state, new_state)

    def update_state(self, **kwargs) -> None:
        """Update specific top-level fields of the state."""
        self.set_state(replace(self._state, **kwargs))

    def update_form(self, **kwargs) -> None:
        """Update form field text (height, weight, age)."""
        current = self._state.form
        new_form = FormState(
            height=str(kwargs.get("height", current.height)),
            weight=str(kwargs.get("weight", current.weight)),
            age=str(kwargs.get("age", current.age)),
        )
        self.update_state(form=new_form)

    def reset_form(self) -> None:
        self.update_state(form=FormState())

    def set_result(self, bmi: Optional[float], classification: Optional[BmiClassification]) -> None:
        self.update_state(result=ResultState(bmi=bmi, classification=classification))

    def clear_result(self) -> None:
        self.update_state(result=ResultState())

    def set_message(self, message: str, level: MessageLevel = MessageLevel.INFO) -> None:
        self.update_state(message=message, message_level=level)

    def clear_message(self) -> None:
        self.update_state(message="", message_level=MessageLevel.INFO)

    def set_loading(self, loading: bool) -> None:
        self.update_state(loading=bool(loading))

    def is_loading(self) -> bool:
        return self._state.loading

    def set_history(self, records: List[BmiRecord], loaded: bool = True) -> None:
        self.update_state(history=HistoryState(records=list(records), loaded=loaded))

    def set_active_tab(self, tab: TabType) -> None:
        """Set the active tab."""
        self.update_state(active_tab=tab)

    def add_listener(self, event: str, callback: Callable) -> None:
        """Add a listener for state change events."""
        if event not in self._listeners:
            self._listeners[event] = []
        self._listeners[event].append(callback)

    def remove_listener(self, event: str, callback: Callable) -> None:
        """Remove a listener for state change events."""
        if event in self._listeners:
            try:
                self._listeners[event].remove(callback)
            except ValueError:
                pass

    def _notify_listeners(self, event: str, *args, **kwargs) -> None:
        """Notify all listeners for a specific event."""
        if event in self._listeners:
            for callback in self._listeners[event]:
                try:
                    callback(*args, **kwargs)
                except Exception as e:
                    logger.error(f"Error in state listener callback: {e}")
