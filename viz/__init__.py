"""Plotting helpers shared by the CLI and the Streamlit history tab."""
