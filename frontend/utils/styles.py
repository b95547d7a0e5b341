"""
Global styles and CSS for the TipSplit UI.
"""

COLORS = {
    "bg_card": "#ffffff",
    "border": "#e5e7eb",
    "text_primary": "#111827",
    "text_secondary": "#6b7280",
    "accent": "#16a34a",
    "accent_soft": "#dcfce7",
    "danger": "#dc2626",
}


def get_global_css() -> str:
    """Return global CSS for the app."""
    return f"""
    <style>
        .app-header {{
            display: flex;
            align-items: center;
            gap: 10px;
            padding: 8px 0 16px 0;
            border-bottom: 1px solid {COLORS['border']};
            margin-bottom: 16px;
        }}

        .app-header-icon {{
            background: {COLORS['accent_soft']};
            color: {COLORS['accent']};
            border-radius: 10px;
            padding: 6px 10px;
            font-size: 20px;
        }}

        .app-header-title {{
            font-size: 26px;
            font-weight: 700;
            color: {COLORS['text_primary']};
        }}

        .app-header-title .highlight {{
            color: {COLORS['accent']};
        }}

        .result-card {{
            background: {COLORS['bg_card']};
            border: 1px solid {COLORS['border']};
            border-radius: 12px;
            padding: 16px;
            margin-bottom: 12px;
        }}

        .result-label {{
            color: {COLORS['text_secondary']};
            font-size: 12px;
            text-transform: uppercase;
        }}

        .result-value {{
            color: {COLORS['text_primary']};
            font-size: 24px;
            font-weight: 700;
        }}
    </style>
    """


def result_card(label: str, value: str) -> str:
    """HTML for one calculator result tile."""
    return f"""
    <div class="result-card">
        <div class="result-label">{label}</div>
        <div class="result-value">{value}</div>
    </div>
    """


def inject_styles():
    """Inject global styles into the Streamlit app."""
    import streamlit as st
    st.markdown(get_global_css(), unsafe_allow_html=True)
