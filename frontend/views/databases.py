import streamlit as st

from config import PROTECTED_DATABASES
from state import DatabaseStore, LoadStatus
from utils.formatters import format_bytes, format_stat_value, stat_label


def _render_list(databases: DatabaseStore):
    if databases.list_status == LoadStatus.LOADING:
        st.info("Loading databases...")
        return
    if databases.list_status == LoadStatus.FAILED:
        st.error(f"Could not load databases: {databases.last_error}")
        return
    if not databases.items:
        st.info("No databases")
        return

    rows = []
    for db in databases.items:
        stats = db.get("stats") or {}
        rows.append({
            "Name": db.get("name"),
            "Size on disk": format_bytes(db.get("size_on_disk")),
            "Collections": len(db.get("collections") or []),
            "Documents": format_stat_value("objects", stats.get("objects", "-")),
            "Data size": format_stat_value("dataSize", stats.get("dataSize", "-")),
        })
    st.dataframe(rows, use_container_width=True, hide_index=True)


def _render_active(databases: DatabaseStore):
    if databases.item_status == LoadStatus.LOADING:
        st.info(f"Loading {databases.active_name}...")
        return
    active = databases.active
    if active is None:
        return

    st.subheader(f"📦 {active.get('name')}")
    stats = databases.stats
    if not stats:
        st.caption("Statistics unavailable")
    else:
        cols = st.columns(4)
        for i, (key, value) in enumerate(stats.items()):
            cols[i % 4].metric(stat_label(key), format_stat_value(key, value))

    for collection in active.get("collections") or []:
        st.write(f"- **{collection.get('name')}** ({collection.get('count', 0)} documents)")


def render(databases: DatabaseStore):
    st.title("Databases")

    if databases.list_status == LoadStatus.IDLE:
        databases.load_list()

    if st.button("🔄 Refresh"):
        databases.load_list()

    _render_list(databases)

    st.divider()

    names = databases.names
    if names:
        selected = st.selectbox("Database", names, index=None, placeholder="Choose a database")
        if selected and st.button("Open"):
            databases.load_item(selected)
        _render_active(databases)

    st.divider()

    with st.expander("➕ Create a database"):
        with st.form("create_database_form"):
            name = st.text_input("Database name")
            submitted = st.form_submit_button("Create", use_container_width=True)
            if submitted:
                if not name:
                    st.error("A name is required")
                elif databases.create(name):
                    st.success(f"Database '{name}' created")
                    st.rerun()
                else:
                    st.error(f"Create failed: {databases.last_error}")

    with st.expander("🗑️ Drop databases"):
        with st.form("delete_database_form"):
            droppable = [n for n in names if n not in PROTECTED_DATABASES]
            selected = st.multiselect("Databases", droppable)
            submitted = st.form_submit_button("Drop", use_container_width=True)
            if submitted and selected:
                results = databases.delete(selected)
                if databases.delete_status == LoadStatus.FAILED:
                    st.error(f"Drop failed: {databases.last_error}")
                for result in results:
                    for name, outcome in result.items():
                        if outcome == "success":
                            st.success(f"Dropped '{name}'")
                        else:
                            st.warning(f"Could not drop '{name}'")
