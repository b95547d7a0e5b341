import streamlit as st
from streamlit_option_menu import option_menu
from components import header
from views import login, calculator, settings
from utils.styles import inject_styles
from config import APP_NAME


def init_session():
    defaults = {
        "is_authenticated": False,
        "user_id": None,
        "user": None,
        "token": None,
        "nav_page": "Calculator",
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def logout():
    for key in ["token", "user", "user_id"]:
        st.session_state[key] = None
    st.session_state["is_authenticated"] = False
    st.rerun()


def main():
    st.set_page_config(page_title=APP_NAME, page_icon="🐷", layout="wide")
    inject_styles()
    init_session()

    header.render()

    # --- Access control
    if not st.session_state["is_authenticated"]:
        login.render()
        st.stop()

    # --- Sidebar navigation
    with st.sidebar:
        nav_options = ["Calculator", "Settings"]

        current_page = st.session_state.get("nav_page", "Calculator")
        try:
            default_index = nav_options.index(current_page)
        except ValueError:
            default_index = 0

        page_selected = option_menu(
            menu_title="Navigation",
            options=nav_options,
            icons=["calculator", "gear"],
            default_index=default_index,
            key="main_nav",
        )

        if page_selected != current_page:
            st.session_state["nav_page"] = page_selected
            st.rerun()

        user = st.session_state.get("user") or {}
        if user.get("email"):
            st.caption(f"Signed in as {user['email']}")
        if st.button("Log out", use_container_width=True):
            logout()

    page = st.session_state.get("nav_page", "Calculator")

    # --- Routing
    if page == "Calculator":
        calculator.render()
    elif page == "Settings":
        settings.render()


if __name__ == "__main__":
    main()
