"""
Global styles and CSS for the admin console.
"""

COLORS = {
    "bg_secondary": "#161b22",
    "bg_card": "#21262d",
    "border": "#30363d",
    "text_primary": "#f0f6fc",
    "text_secondary": "#8b949e",
    "accent_green": "#3fb950",
    "accent_blue": "#58a6ff",
}


def get_global_css() -> str:
    """Return global CSS for the console pages."""
    return f"""
    <style>
        div[data-testid="stMetric"] {{
            background: {COLORS['bg_card']};
            border: 1px solid {COLORS['border']};
            border-radius: 8px;
            padding: 12px 16px;
        }}

        div[data-testid="stMetricLabel"] {{
            color: {COLORS['text_secondary']};
            font-size: 12px;
            text-transform: uppercase;
        }}

        div[data-testid="stMetricValue"] {{
            color: {COLORS['text_primary']};
            font-size: 20px;
        }}

        div[data-testid="stExpander"] {{
            border: 1px solid {COLORS['border']};
            border-radius: 8px;
        }}

        code {{
            color: {COLORS['accent_blue']};
        }}
    </style>
    """


def inject_styles():
    """Inject global styles into the Streamlit app."""
    import streamlit as st
    st.markdown(get_global_css(), unsafe_allow_html=True)
