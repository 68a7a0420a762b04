from __future__ import annotations

"""Tracker service: wires settings, API client and UI logic together.

One instance lives in `st.session_state` per browser session. It exposes
the framework-agnostic `TrackerManager` plus a small amount of widget
bookkeeping Streamlit needs (the form key nonce), so components stay
free of construction and configuration concerns.
"""

from pathlib import Path
from typing import Optional
import logging

from bmi_tracker.api_client import BmiApiClient
from bmi_tracker.settings import Settings, load_settings
from bmi_tracker.ui_logic import StateManager, TrackerManager
from bmi_tracker.ui_logic.state_manager import FormState, UIState

logger = logging.getLogger(__name__)


class TrackerService:
    """Session-scoped facade over `TrackerManager`.

    The form widgets are keyed with `form_nonce`; whenever the manager
    resets the form the nonce is bumped so Streamlit renders fresh, empty
    inputs instead of restoring the previous widget values.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        client: Optional[BmiApiClient] = None,
        config_path: Optional[Path] = None,
    ) -> None:
        self.settings = settings or load_settings(config_path)
        self.client = client or BmiApiClient.from_settings(self.settings)
        self.state_manager = StateManager()
        self.manager = TrackerManager(self.state_manager, self.client, self.settings)
        self.form_nonce = 0
        self.pending_delete_id: Optional[str] = None
        self.state_manager.add_listener("state_changed", self._on_state_changed)
        logger.info("Tracker service ready (API %s)", self.settings.api_base_url)

    @property
    def state(self) -> UIState:
        return self.state_manager.get_state()

    def _on_state_changed(self, old_state: UIState, new_state: UIState) -> None:
        if new_state.form == FormState() and old_state.form != new_state.form:
            self.form_nonce += 1

    def widget_key(self, name: str) -> str:
        """Key for a form widget tied to the current form generation."""
        return f"bmi_{name}_{self.form_nonce}"

    def request_delete(self, record_id: str) -> None:
        self.pending_delete_id = record_id

    def cancel_delete(self) -> None:
        self.pending_delete_id = None

    def confirm_delete(self) -> bool:
        record_id, self.pending_delete_id = self.pending_delete_id, None
        return self.manager.delete_record(record_id, confirmed=record_id is not None)


__all__ = ["TrackerService"]
