import streamlit as st
from config import APP_NAME


def header_html(highlight: str = "Tip", rest: str = "Split") -> str:
    return f"""
    <div class="app-header">
        <span class="app-header-icon">&#128055;</span>
        <span class="app-header-title"><span class="highlight">{highlight}</span>{rest}</span>
    </div>
    """


def render():
    """Static application header. No inputs, no state."""
    st.markdown(header_html(), unsafe_allow_html=True)
    st.caption(f"{APP_NAME} - split bills and manage settings")
