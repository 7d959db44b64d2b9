import streamlit as st
from streamlit_option_menu import option_menu

from config import API_TIMEOUT, API_URL, APP_NAME
from state import NO_RESULTS, get_stores
from utils.api import APIClient
from utils.styles import inject_styles
from views import collections, databases


def init_session():
    defaults = {
        "nav_page": "Databases",
        "notifications": [],
        "listeners_bound": False,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def _bind_notifications(*stores):
    """Queue store notifications so the next render can show them."""
    if st.session_state["listeners_bound"]:
        return

    notifications = st.session_state["notifications"]

    def on_event(event: str, payload: dict):
        if event == NO_RESULTS:
            notifications.append(payload.get("notification"))

    for store in stores:
        store.subscribe(on_event)
    st.session_state["listeners_bound"] = True


def _show_notifications():
    notifications = st.session_state["notifications"]
    while notifications:
        st.warning(notifications.pop(0))


def main():
    st.set_page_config(page_title=APP_NAME, layout="wide")
    inject_styles()
    init_session()

    api = APIClient(API_URL, timeout=API_TIMEOUT)
    database_store, collection_store = get_stores(st.session_state, api)
    _bind_notifications(database_store, collection_store)

    # --- Sidebar navigation
    with st.sidebar:
        nav_options = ["Databases", "Collections"]
        current_page = st.session_state.get("nav_page", "Databases")
        try:
            default_index = nav_options.index(current_page)
        except ValueError:
            default_index = 0

        page_selected = option_menu(
            menu_title=APP_NAME,
            options=nav_options,
            icons=["database", "collection"],
            default_index=default_index,
            key="main_nav",
        )
        if page_selected != current_page:
            st.session_state["nav_page"] = page_selected
            st.rerun()

    page = st.session_state.get("nav_page", "Databases")

    # --- Routing
    if page == "Databases":
        databases.render(database_store)
    elif page == "Collections":
        collections.render(database_store, collection_store)

    _show_notifications()


if __name__ == "__main__":
    main()
