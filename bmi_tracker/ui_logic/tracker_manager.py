"""
Framework-agnostic actions for the BMI tracker UI.

Each public method corresponds to one user action (button press or tab
switch). Actions never raise to the UI: failures end up as the state's
message. Network actions are gated by the loading flag so that at most one
request is in flight per session.
"""

from datetime import datetime
from typing import Callable, Optional
import logging

from bmi_tracker.api_client import BmiApiClient
from bmi_tracker.bmi_engine import classify, compute_bmi
from bmi_tracker.errors import ApiError
from bmi_tracker.records import BmiRecord
from bmi_tracker.settings import Settings

from .state_manager import MessageLevel, StateManager, TabType
from .validation_manager import ValidationManager

logger = logging.getLogger(__name__)

MSG_CALCULATED = "BMI calculated successfully (not saved to database)."
MSG_SAVED = "BMI calculated and saved successfully!"
MSG_HISTORY_LOADED = "BMI history loaded successfully!"
MSG_DELETED = "BMI record deleted successfully!"


class TrackerManager:
    """
    Coordinates validation, BMI computation and API calls against the state.

    Attributes:
        state_manager: Holds the UI state
        validation_manager: Form validation rules
        client: Records API client
        settings: Runtime settings (rounding precision)
        clock: Returns the creation timestamp for new records
    """

    def __init__(
        self,
        state_manager: StateManager,
        client: BmiApiClient,
        settings: Optional[Settings] = None,
        validation_manager: Optional[ValidationManager] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.state_manager = state_manager
        self.client = client
        self.settings = settings or Settings()
        self.validation_manager = validation_manager or ValidationManager()
        self.clock = clock

    @property
    def decimals(self) -> int:
        return self.settings.bmi_decimals

    def _show_result(self, bmi: float) -> None:
        self.state_manager.set_result(bmi, classify(bmi))

    def calculate_only(self) -> Optional[float]:
        """Compute BMI from the form without saving. Returns the BMI or None."""
        self.state_manager.clear_message()
        form = self.state_manager.get_state().form
        result, parsed = self.validation_manager.parse_form(form.height, form.weight, for_save=False)
        if parsed is None:
            logger.info("Calculation rejected: %s", result.errors[0])
            self.state_manager.set_message(result.first_message(), MessageLevel.ERROR)
            return None

        bmi = compute_bmi(parsed.height, parsed.weight, self.decimals)
        self._show_result(bmi)
        self.state_manager.set_message(MSG_CALCULATED, MessageLevel.SUCCESS)
        return bmi

    def submit(self) -> bool:
        """Validate, compute and save a new record. Returns True when saved."""
        if self.state_manager.is_loading():
            logger.debug("Submit ignored: a request is already in flight")
            return False

        self.state_manager.set_loading(True)
        self.state_manager.clear_message()
        try:
            form = self.state_manager.get_state().form
            result, parsed = self.validation_manager.parse_form(form.height, form.weight, form.age, for_save=True)
            if parsed is None:
                logger.info("Save rejected: %s", result.errors[0])
                self.state_manager.set_message(result.first_message(), MessageLevel.ERROR)
                return False

            now = self.clock() if self.clock is not None else None
            record = BmiRecord.create(parsed.height, parsed.weight, parsed.age, decimals=self.decimals, now=now)
            self._show_result(record.bmi)

            try:
                self.client.create_record(record)
            except ApiError as e:
                self.state_manager.set_message(e.message, MessageLevel.ERROR)
                return False

            self.state_manager.set_message(MSG_SAVED, MessageLevel.SUCCESS)
            self.state_manager.reset_form()
            if self.state_manager.get_state().active_tab == TabType.HISTORY:
                self._refresh_after_mutation()
            return True
        finally:
            self.state_manager.set_loading(False)

    def fetch_history(self) -> bool:
        """Load records from the API. Returns True on success."""
        if self.state_manager.is_loading():
            logger.debug("History fetch ignored: a request is already in flight")
            return False

        self.state_manager.set_loading(True)
        self.state_manager.clear_message()
        try:
            if self._load_history():
                self.state_manager.set_message(MSG_HISTORY_LOADED, MessageLevel.SUCCESS)
                return True
            return False
        finally:
            self.state_manager.set_loading(False)

    def delete_record(self, record_id: Optional[str], confirmed: bool = False) -> bool:
        """Delete a record after confirmation, then refresh the list."""
        if not confirmed:
            logger.debug("Delete of %s not confirmed", record_id)
            return False
        if not record_id:
            return False
        if self.state_manager.is_loading():
            logger.debug("Delete ignored: a request is already in flight")
            return False

        self.state_manager.set_loading(True)
        try:
            try:
                self.client.delete_record(record_id)
            except ApiError as e:
                self.state_manager.set_message(e.message, MessageLevel.ERROR)
                return False

            self.state_manager.set_message(MSG_DELETED, MessageLevel.SUCCESS)
            self._refresh_after_mutation()
            return True
        finally:
            self.state_manager.set_loading(False)

    def clear_form(self) -> None:
        """Reset inputs, result and message."""
        self.state_manager.reset_form()
        self.state_manager.clear_result()
        self.state_manager.clear_message()

    def switch_tab(self, tab: TabType) -> None:
        """Activate `tab`; entering the history tab loads the records."""
        previous = self.state_manager.get_state().active_tab
        self.state_manager.set_active_tab(tab)
        if tab == TabType.HISTORY and previous != TabType.HISTORY:
            self.fetch_history()

    def _load_history(self) -> bool:
        """Fetch records into state. On failure the list is emptied and the error shown."""
        try:
            records = self.client.list_records()
        except ApiError as e:
            self.state_manager.set_history([], loaded=False)
            self.state_manager.set_message(e.message, MessageLevel.ERROR)
            return False
        self.state_manager.set_history(records)
        return True

    def _refresh_after_mutation(self) -> None:
        """Reload the list inside the current busy window, keeping the success message."""
        self._load_history()
