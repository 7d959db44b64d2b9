import streamlit as st

from state import CollectionStore, DatabaseStore, LoadStatus
from utils.formatters import format_document


def _choose_database(databases: DatabaseStore, collections: CollectionStore):
    names = databases.names
    if not names:
        st.info("Load the database list first")
        return
    index = names.index(collections.database) if collections.database in names else None
    selected = st.selectbox("Database", names, index=index, placeholder="Choose a database")
    if selected and selected != collections.database:
        collections.select_database(selected)
        collections.load_list()


def _render_documents(collections: CollectionStore):
    if collections.item_status == LoadStatus.LOADING:
        st.info(f"Loading {collections.active_name}...")
        return
    active = collections.active
    if active is None:
        return

    objects = active.get("objects") or []
    st.subheader(f"{active.get('name')} ({active.get('count', len(objects))} documents)")
    for document in objects:
        st.code(format_document(document, collections.current_format), language="json")


def render(databases: DatabaseStore, collections: CollectionStore):
    st.title("Collections")

    _choose_database(databases, collections)
    if not collections.database:
        return

    if collections.list_status == LoadStatus.FAILED:
        st.error(f"Could not load collections: {collections.last_error}")
    elif collections.list_status == LoadStatus.LOADING:
        st.info("Loading collections...")

    names = collections.names
    if names:
        selected = st.selectbox("Collection", names, index=None, placeholder="Choose a collection")
        fmt = st.radio("Format", CollectionStore.FORMATS, horizontal=True,
                       index=CollectionStore.FORMATS.index(collections.current_format))
        collections.set_format(fmt)
        if selected and st.button("View documents"):
            collections.load_item(selected)
        _render_documents(collections)
    else:
        st.info(f"No collections in {collections.database}")

    st.divider()

    with st.expander("➕ Create a collection"):
        with st.form("create_collection_form"):
            name = st.text_input("Collection name")
            submitted = st.form_submit_button("Create", use_container_width=True)
            if submitted:
                if not name:
                    st.error("A name is required")
                elif collections.create(name):
                    st.success(f"Collection '{name}' created")
                    st.rerun()
                else:
                    st.error(f"Create failed: {collections.last_error}")

    with st.expander("🗑️ Drop collections"):
        with st.form("delete_collection_form"):
            selected = st.multiselect("Collections", names)
            submitted = st.form_submit_button("Drop", use_container_width=True)
            if submitted and selected:
                for result in collections.delete(selected):
                    for name, outcome in result.items():
                        if outcome == "success":
                            st.success(f"Dropped '{name}'")
                        else:
                            st.warning(f"Could not drop '{name}'")
                if collections.delete_status == LoadStatus.FAILED:
                    st.error(f"Drop failed: {collections.last_error}")
