from __future__ import annotations

import streamlit as st

from bmi_tracker.bmi_engine import classify
from bmi_tracker.records import BmiRecord, records_to_dataframe
from bmi_tracker.ui_logic import TabType

from .base_component import BaseComponent
from .result_card import render_message
from ui.utils.helpers import format_measure, format_record_date


class HistoryTab(BaseComponent):
    """History tab: list, chart and delete of saved BMI records.

    - Refresh reloads the list from the API
    - Empty state offers a shortcut back to the calculator
    - Deleting asks for confirmation before the DELETE request
    """

    def render(self) -> None:
        head, refresh_col = st.columns([4, 1])
        with head:
            st.header("📈 Your BMI History")
        with refresh_col:
            if st.button("🔄 Refresh Data", disabled=self.state.loading, key="history_refresh"):
                with st.spinner("Loading BMI history..."):
                    self.manager.fetch_history()

        records = self.state.history.records
        if not records:
            st.info(
                "📊 **No BMI records found**\n\n"
                "Calculate and save your first BMI to start tracking your progress!"
            )
            if st.button("Go to Calculator", key="history_go_calculator"):
                self.manager.switch_tab(TabType.CALCULATOR)
                st.rerun()
        else:
            st.markdown(f"**📊 Total Records: {len(records)}**")
            self._render_table_and_chart(records)
            for index, record in enumerate(records):
                self._render_record(index, record)

        render_message(self.state.message, self.state.message_level)

    def _render_table_and_chart(self, records: list[BmiRecord]) -> None:
        df = records_to_dataframe(records)
        st.dataframe(
            df.drop(columns=["advice"]),
            hide_index=True,
            use_container_width=True,
        )
        try:
            from viz.plots import build_bmi_history_figure
            import matplotlib.pyplot as plt

            fig = build_bmi_history_figure(records)
        except ValueError:
            st.caption("Chart unavailable: records have no dates.")
            return
        st.pyplot(fig)
        plt.close(fig)

    def _render_record(self, index: int, record: BmiRecord) -> None:
        classification = classify(record.bmi)
        with st.container(border=True):
            cols = st.columns(7)
            cols[0].metric("📊 BMI", f"{record.bmi}")
            cols[1].markdown(
                f"**🏷️ Category**<br><span style='color:{classification.color};font-weight:bold'>"
                f"{classification.category}</span>",
                unsafe_allow_html=True,
            )
            cols[2].markdown(f"**📏 Height**<br>{format_measure(record.height, 'm')}", unsafe_allow_html=True)
            cols[3].markdown(f"**⚖️ Weight**<br>{format_measure(record.weight, 'kg')}", unsafe_allow_html=True)
            cols[4].markdown(f"**🎂 Age**<br>{record.age if record.age is not None else 'N/A'}", unsafe_allow_html=True)
            cols[5].markdown(f"**📅 Date**<br>{format_record_date(record.created_at)}", unsafe_allow_html=True)
            if record.id:
                with cols[6]:
                    self._render_delete_controls(record.id)
            st.markdown(
                f"<div style='border-left:4px solid {classification.color};padding-left:8px'>"
                f"💡 <strong>Health Status:</strong> {classification.advice}</div>",
                unsafe_allow_html=True,
            )

    def _render_delete_controls(self, record_id: str) -> None:
        busy = self.state.loading
        if self.service.pending_delete_id != record_id:
            if st.button("🗑️ Delete", key=f"delete_{record_id}", disabled=busy):
                self.service.request_delete(record_id)
                st.rerun()
            return

        st.warning("Are you sure you want to delete this BMI record?")
        yes, no = st.columns(2)
        with yes:
            if st.button("Yes", key=f"confirm_delete_{record_id}", disabled=busy):
                self.service.confirm_delete()
                st.rerun()
        with no:
            if st.button("Cancel", key=f"cancel_delete_{record_id}"):
                self.service.cancel_delete()
                st.rerun()


def render_history_tab(service) -> None:
    HistoryTab(service).render()
