"""
BMI Calculator & Tracker UI.

Two tabs (Calculator, BMI History) over a session-scoped tracker service.
"""

from pathlib import Path
import sys
import streamlit as st

# Ensure project root is on sys.path to enable bmi_tracker imports
project_root = Path(__file__).resolve().parents[1]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from bmi_tracker.errors import ConfigError
from bmi_tracker.settings import load_settings
from bmi_tracker.ui_logic import TabType
from bmi_tracker.utils_logging import configure_logging
from ui.services import TrackerService
from ui.components.calculator_tab import render_calculator_tab
from ui.components.history_tab import render_history_tab


st.set_page_config(page_title="BMI Calculator & Tracker", page_icon="📊", layout="centered")

_TAB_LABELS = {
    TabType.CALCULATOR: "📊 Calculator",
    TabType.HISTORY: "📈 BMI History",
}


def _get_service() -> TrackerService:
    if "tracker_service" not in st.session_state:
        settings = load_settings()
        configure_logging(settings.log_dir)
        st.session_state["tracker_service"] = TrackerService(settings)
    return st.session_state["tracker_service"]


def main() -> None:
    st.title("BMI Calculator & Tracker")
    st.caption("Track your Body Mass Index over time and maintain a healthy lifestyle")

    try:
        service = _get_service()
    except ConfigError as e:
        st.error(f"Configuration error: {e}")
        return

    tabs = list(_TAB_LABELS)
    current = service.state.active_tab
    chosen_label = st.radio(
        "View",
        options=[_TAB_LABELS[t] for t in tabs],
        index=tabs.index(current),
        horizontal=True,
        label_visibility="collapsed",
        key=f"active_tab_{current.value}",
    )
    chosen = next(t for t in tabs if _TAB_LABELS[t] == chosen_label)
    if chosen != current:
        with st.spinner("Loading BMI history..." if chosen == TabType.HISTORY else "Loading..."):
            service.manager.switch_tab(chosen)
        st.rerun()

    st.divider()
    if service.state.active_tab == TabType.CALCULATOR:
        render_calculator_tab(service)
    else:
        render_history_tab(service)


if __name__ == "__main__":
    main()
