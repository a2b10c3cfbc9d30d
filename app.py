"""
Worklog Dashboard - Main Application Entry Point

This is the root application file that handles:
- Page configuration (MUST be first Streamlit command)
- Logging setup
- Session state initialization
- Matrix Green theme CSS
- Rendering the dashboard page
"""

import logging

import streamlit as st

# Core library imports
from lib.session_state import initialize_session_state
from views import dashboard

# =============================================================================
# PAGE CONFIG - MUST BE FIRST STREAMLIT COMMAND
# =============================================================================

st.set_page_config(
    page_title="Weekly Developer Activity",
    page_icon="📊",
    layout="wide",
    initial_sidebar_state="expanded",
    menu_items={
        'About': """
        # Weekly Developer Activity

        Pull request, commit, review and incident totals per developer.

        Built with Streamlit | Matrix Green Theme
        """
    }
)

# =============================================================================
# LOGGING
# =============================================================================

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

# =============================================================================
# SESSION STATE INITIALIZATION
# =============================================================================

initialize_session_state()

# =============================================================================
# MATRIX GREEN THEME CSS
# =============================================================================

st.markdown("""
<style>
    /* Matrix Green Theme */
    :root {
        --background-color: #000000;
        --foreground-color: #87D7AF;
        --primary-color: #5FAF87;
        --border-color: #2d5f4f;
    }

    /* Main background */
    .stApp {
        background-color: var(--background-color);
        color: var(--foreground-color);
    }

    /* Sidebar styling */
    [data-testid="stSidebar"] {
        background-color: var(--background-color);
        border-right: 1px solid var(--border-color);
    }

    /* Headers */
    h1, h2, h3, h4, h5, h6 {
        color: var(--primary-color) !important;
        font-family: 'Courier New', monospace;
    }

    /* Text elements */
    p, span, div, label {
        color: var(--foreground-color);
    }

    /* Select boxes */
    .stSelectbox > div > div {
        background-color: rgba(93, 175, 135, 0.05);
        border: 1px solid var(--border-color);
    }

    /* Info boxes */
    .stInfo {
        background-color: rgba(135, 215, 175, 0.1);
        border-left: 4px solid var(--foreground-color);
        color: var(--foreground-color);
    }

    /* Dividers */
    hr {
        border-color: var(--border-color);
    }

    /* Spinner */
    .stSpinner > div {
        border-top-color: var(--primary-color);
    }
</style>
""", unsafe_allow_html=True)

# =============================================================================
# DASHBOARD
# =============================================================================

dashboard.render()

# =============================================================================
# FOOTER
# =============================================================================

st.divider()
st.caption("Weekly Developer Activity | Built with Streamlit | Matrix Green Theme")
