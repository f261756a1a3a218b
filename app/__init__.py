"""Streamlit front-end for the projection engine."""
