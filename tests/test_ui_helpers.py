"""Tests for UI display helpers and the session tracker service."""

from datetime import datetime, timezone

from bmi_tracker.records import BmiRecord
from bmi_tracker.settings import Settings
from bmi_tracker.ui_logic import MessageLevel
from ui.services.tracker_service import TrackerService
from ui.utils.helpers import format_measure, format_record_date, message_icon


def test_format_record_date():
    assert format_record_date(datetime(2025, 1, 5, 10, 30, tzinfo=timezone.utc)) == "Jan 5, 2025"
    assert format_record_date(None) == "N/A"


def test_format_measure():
    assert format_measure(1.75, "m") == "1.75m"
    assert format_measure(70.0, "kg") == "70kg"
    assert format_measure(None, "kg") == "N/A"


def test_message_icon():
    assert message_icon(MessageLevel.SUCCESS) == "✅"
    assert message_icon(MessageLevel.ERROR) == "❌"


def _service(client):
    return TrackerService(Settings(), client=client)


def test_widget_key_changes_after_successful_save(fake_client):
    service = _service(fake_client)
    key = service.widget_key("height")
    service.state_manager.update_form(height="1.75", weight="70")
    assert service.widget_key("height") == key
    assert service.manager.submit()
    assert service.widget_key("height") != key


def test_widget_key_stable_after_failed_save(fake_client):
    fake_client.fail_create = True
    service = _service(fake_client)
    service.state_manager.update_form(height="1.75", weight="70")
    key = service.widget_key("weight")
    assert not service.manager.submit()
    assert service.widget_key("weight") == key


def test_clear_bumps_widget_key(fake_client):
    service = _service(fake_client)
    service.state_manager.update_form(height="1.75")
    before = service.form_nonce
    service.manager.clear_form()
    assert service.form_nonce == before + 1


def test_delete_flow(fake_client):
    fake_client.records = [BmiRecord(1.75, 70, 30, 22.86, id="a")]
    service = _service(fake_client)
    service.manager.fetch_history()

    service.request_delete("a")
    assert service.pending_delete_id == "a"
    service.cancel_delete()
    assert service.pending_delete_id is None
    assert not service.confirm_delete()
    assert ("delete", "a") not in fake_client.calls

    service.request_delete("a")
    assert service.confirm_delete()
    assert service.pending_delete_id is None
    assert service.state.history.records == []
