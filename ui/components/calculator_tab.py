from __future__ import annotations

import streamlit as st

from .base_component import BaseComponent
from .result_card import render_message, render_result_card


class CalculatorTab(BaseComponent):
    """Calculator tab: height/weight/age inputs and the three form actions.

    Inputs are plain text so the raw value reaches validation unchanged;
    range checks and their messages live in `ValidationManager`.
    """

    def render(self) -> None:
        st.header("Enter Your Details")
        form = self.state.form

        c1, c2, c3 = st.columns(3)
        with c1:
            height = st.text_input(
                "📏 Height (meters)", value=form.height, placeholder="e.g., 1.75",
                key=self.service.widget_key("height"),
            )
        with c2:
            weight = st.text_input(
                "⚖️ Weight (kg)", value=form.weight, placeholder="e.g., 70.5",
                key=self.service.widget_key("weight"),
            )
        with c3:
            age = st.text_input(
                "🎂 Age (years)", value=form.age, placeholder="e.g., 25",
                key=self.service.widget_key("age"),
            )
        self.service.state_manager.update_form(height=height, weight=weight, age=age)

        busy = self.state.loading
        b1, b2, b3 = st.columns(3)
        with b1:
            if st.button("🧮 Calculate Only", disabled=busy, use_container_width=True):
                self.manager.calculate_only()
        with b2:
            if st.button("💾 Calculate & Save BMI", type="primary", disabled=busy, use_container_width=True):
                with st.spinner("Saving..."):
                    saved = self.manager.submit()
                if saved:
                    # fresh widgets for the cleared form
                    st.rerun()
        with b3:
            if st.button("🗑️ Clear Form", disabled=busy, use_container_width=True):
                self.manager.clear_form()
                st.rerun()

        result = self.state.result
        if result.bmi is not None and result.classification is not None:
            render_result_card(result.bmi, result.classification)

        render_message(self.state.message, self.state.message_level)


def render_calculator_tab(service) -> None:
    CalculatorTab(service).render()
