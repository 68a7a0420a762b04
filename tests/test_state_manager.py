"""Tests for the framework-agnostic UI state manager."""

from bmi_tracker.bmi_engine import NORMAL_WEIGHT
from bmi_tracker.ui_logic.state_manager import (
    FormState,
    MessageLevel,
    StateManager,
    TabType,
    UIState,
)


def test_default_state():
    sm = StateManager()
    state = sm.get_state()
    assert state == UIState()
    assert state.active_tab == TabType.CALCULATOR
    assert state.form == FormState()
    assert state.message == ""
    assert not sm.is_loading()


def test_update_form_keeps_other_fields_as_text():
    sm = StateManager()
    sm.update_form(height="1.75")
    sm.update_form(weight=70)
    assert sm.get_state().form == FormState(height="1.75", weight="70", age="")


def test_updates_replace_state_object():
    sm = StateManager()
    before = sm.get_state()
    sm.set_message("hello", MessageLevel.SUCCESS)
    after = sm.get_state()
    assert before is not after
    assert before.message == ""
    assert after.message == "hello"
    assert after.message_level == MessageLevel.SUCCESS


def test_result_and_clear():
    sm = StateManager()
    sm.set_result(22.86, NORMAL_WEIGHT)
    assert sm.get_state().result.classification.category == "Normal weight"
    sm.clear_result()
    assert sm.get_state().result.bmi is None


def test_history_copy_and_loaded_flag():
    sm = StateManager()
    records = []
    sm.set_history(records)
    records.append("late")
    assert sm.get_state().history.records == []
    assert sm.get_state().history.loaded
    sm.set_history([], loaded=False)
    assert not sm.get_state().history.loaded


def test_listeners_receive_old_and_new_state():
    sm = StateManager()
    seen = []
    cb = lambda old, new: seen.append((old.active_tab, new.active_tab))  # noqa: E731
    sm.add_listener("state_changed", cb)
    sm.set_active_tab(TabType.HISTORY)
    assert seen == [(TabType.CALCULATOR, TabType.HISTORY)]
    sm.remove_listener("state_changed", cb)
    sm.set_active_tab(TabType.CALCULATOR)
    assert len(seen) == 1
    # removing twice is harmless
    sm.remove_listener("state_changed", cb)


def test_failing_listener_does_not_break_updates():
    sm = StateManager()

    def boom(old, new):
        raise RuntimeError("listener failure")

    sm.add_listener("state_changed", boom)
    sm.set_loading(True)
    assert sm.is_loading()


def test_only_current_state_is_kept():
    sm = StateManager()
    seen = []
    sm.add_listener("state_changed", lambda old, new: seen.append(old))
    for i in range(3):
        sm.update_form(height=str(i))
    assert sm.get_state().form.height == "2"
    assert [s.form.height for s in seen] == ["", "0", "1"]
    assert set(vars(sm)) == {"_state", "_listeners"}
