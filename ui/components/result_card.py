from __future__ import annotations

"""BMI result card and scale reference.

Shared by the calculator tab (current result) and the history tab
(per-record advice).
"""

import streamlit as st

from bmi_tracker.bmi_engine import BMI_SCALE, BmiClassification
from bmi_tracker.ui_logic.state_manager import MessageLevel
from ui.utils.helpers import message_icon


def render_bmi_scale() -> None:
    st.markdown("#### BMI Scale Reference")
    cols = st.columns(len(BMI_SCALE))
    for col, (label, range_text, color) in zip(cols, BMI_SCALE):
        with col:
            st.markdown(
                f"<div style='padding:8px 12px;background-color:{color};color:white;"
                f"border-radius:6px;font-size:12px;text-align:center'>{label}: {range_text}</div>",
                unsafe_allow_html=True,
            )


def render_result_card(bmi: float, classification: BmiClassification) -> None:
    """Draw the BMI value, category and advice, followed by the scale legend."""
    with st.container(border=True):
        st.subheader("🎯 Your BMI Result")
        st.markdown(
            f"<div style='font-size:32px;font-weight:bold;text-align:center'>BMI: "
            f"<span style='color:{classification.color}'>{bmi}</span></div>",
            unsafe_allow_html=True,
        )
        st.markdown(
            f"<div style='font-size:20px;font-weight:bold;text-align:center;color:{classification.color}'>"
            f"Category: {classification.category}</div>",
            unsafe_allow_html=True,
        )
        st.info(f"💡 **Advice:** {classification.advice}")
        render_bmi_scale()


def render_message(message: str, level: MessageLevel) -> None:
    """Show the current user-facing message, styled by level."""
    if not message:
        return
    text = f"{message_icon(level)} {message}"
    if level == MessageLevel.SUCCESS:
        st.success(text)
    elif level == MessageLevel.ERROR:
        st.error(text)
    else:
        st.info(text)
