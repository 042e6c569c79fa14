"""Streamlit rendering for each dashboard page."""

import logging
import pandas as pd
import streamlit as st
from .chat import CORRESPONDENTS, ME, messages_for
from .client import ApiClientError, InventoryApiClient
from .forms import (
    FormError, INCOMPLETE_WARNING, PRODUCT_WARNING, missing_product_fields, missing_profile_fields, parse_price_input
)
from .views import CATEGORIES, CustomerView, ProductView, image_data_url

logger = logging.getLogger(__name__)


# ---------------------------
# Notifications
# ---------------------------
def notify(kind: str, text: str):
    """Queue a notification that survives the next st.rerun()."""
    st.session_state.notice = (kind, text)

def show_notice():
    notice = st.session_state.pop("notice", None)
    if not notice:
        return
    kind, text = notice
    {"success": st.success, "warning": st.warning, "error": st.error}[kind](text)

def _view(key: str, factory):
    if key not in st.session_state:
        st.session_state[key] = factory()
    return st.session_state[key]

def _load(view, what: str):
    try:
        view.ensure_loaded()
    except ApiClientError as e:
        logger.error(f"Error fetching {what}: {e.message}")
        st.error(f"Error fetching {what}.")

def _load_again(view, what: str):
    try:
        view.load()
    except ApiClientError as e:
        logger.error(f"Error fetching {what}: {e.message}")
        st.error(f"Error fetching {what}.")


# ---------------------------
# Dashboard
# ---------------------------
def render_overview(client: InventoryApiClient):
    st.title("Dashboard")
    cols = st.columns(2)
    try:
        cols[0].metric("Total Users", client.total_users())
        cols[1].metric("Total Products", client.total_products())
    except ApiClientError as e:
        logger.error(f"Error fetching totals: {e.message}")
        st.error(f"Error fetching totals: {e.message}")


# ---------------------------
# Products
# ---------------------------
def _product_form(view: ProductView):
    st.subheader("Add New Product")
    # Outside the form so the preview updates as soon as a file is picked
    upload_key = f"product_image_{st.session_state.get('upload_generation', 0)}"
    image = st.file_uploader("Product Image", type=["png", "jpg", "jpeg", "gif", "webp"], key=upload_key)
    if image is not None:
        st.image(image, caption="Product Preview", width=128)

    with st.form("add_product", clear_on_submit=True):
        cols = st.columns(2)
        name = cols[0].text_input("Product Name", placeholder="Enter product name")
        price = cols[1].number_input("Price", min_value=0, step=1, value=None, placeholder="Enter product price")
        cols = st.columns(2)
        description = cols[0].text_area("Description", placeholder="Enter product description")
        category = cols[1].selectbox("Category", [""] + CATEGORIES)
        submitted = st.form_submit_button("Add Product")

    if not submitted:
        return
    if missing_product_fields(name, price, description, category):
        st.warning(PRODUCT_WARNING)
        return

    upload = (image.name, image.getvalue(), image.type) if image is not None else None
    with st.spinner("Adding..."):
        try:
            message = view.add(name, int(price), description, category, image=upload)
            notify("success", message or "Product added successfully!")
            st.session_state.upload_generation = st.session_state.get("upload_generation", 0) + 1
        except ApiClientError as e:
            logger.error(f"Error adding product: {e.message}")
            notify("error", f"Error adding product: {e.message}")
    st.rerun()

def _edit_form(view: ProductView, product: dict):
    with st.form(f"edit_{product['id']}"):
        st.markdown("**Edit Product**")
        name = st.text_input("Name", product["name"])
        price = st.text_input("Price", str(product["price"]))
        description = st.text_area("Description", product.get("description") or "")
        category = st.selectbox(
            "Category",
            CATEGORIES,
            index=CATEGORIES.index(product["category"]) if product["category"] in CATEGORIES else 0
        )
        col1, col2 = st.columns(2)
        save = col1.form_submit_button("Save")
        cancel = col2.form_submit_button("Cancel")

    if cancel:
        st.session_state.editing_product = None
        st.rerun()
    if save:
        try:
            integer_price = parse_price_input(price)
        except FormError as e:
            st.warning(str(e))
            return
        try:
            view.update(product["id"], name, integer_price, description, category)
            notify("success", "Product updated successfully!")
            st.session_state.editing_product = None
        except ApiClientError as e:
            logger.error(f"Error updating product: {e.message}")
            notify("error", f"Error updating product: {e.message}")
        st.rerun()

def _delete_confirmation(view: ProductView, product: dict):
    st.warning(f"Delete {product['name']}? You won't be able to revert this!")
    col1, col2 = st.columns(2)
    if col1.button("Yes, delete it!", key=f"confirm_delete_{product['id']}"):
        try:
            notify("success", view.delete(product["id"]) or "Product deleted successfully!")
        except ApiClientError as e:
            logger.error(f"Error deleting product: {e.message}")
            notify("error", f"Error deleting product: {e.message}")
        st.session_state.deleting_product = None
        st.rerun()
    if col2.button("Cancel", key=f"cancel_delete_{product['id']}"):
        st.session_state.deleting_product = None
        st.rerun()

def render_products(client: InventoryApiClient):
    st.title("Products")
    show_notice()
    view = _view("product_view", lambda: ProductView(client))
    _load(view, "products")

    _product_form(view)

    st.subheader("Product List")
    cols = st.columns([2, 2, 1])
    view.search_text = cols[0].text_input("Search products...", value=view.search_text)
    view.category = cols[1].selectbox(
        "Category filter",
        [""] + CATEGORIES,
        index=([""] + CATEGORIES).index(view.category),
        format_func=lambda c: c or "All Categories"
    )
    if cols[2].button("Reload"):
        _load_again(view, "products")

    header = st.columns([1, 2, 1, 3, 1, 2])
    for col, title in zip(header, ["Image", "Product Name", "Price", "Description", "Category", "Actions"]):
        col.markdown(f"**{title}**")

    for product in view.visible:
        row = st.columns([1, 2, 1, 3, 1, 2])
        if product.get("image"):
            row[0].image(image_data_url(product["image"]), width=64)
        row[1].write(product["name"])
        row[2].write(f"₱{product['price']:.2f}")
        row[3].write(product.get("description") or "")
        row[4].write(product["category"])
        if row[5].button("Edit", key=f"edit_btn_{product['id']}"):
            st.session_state.editing_product = product["id"]
        if row[5].button("Delete", key=f"delete_btn_{product['id']}"):
            st.session_state.deleting_product = product["id"]

        if st.session_state.get("editing_product") == product["id"]:
            _edit_form(view, product)
        if st.session_state.get("deleting_product") == product["id"]:
            _delete_confirmation(view, product)

    if view.loaded and not view.visible:
        st.info("No products match the current filters.")

# ---------------------------
# Customers
# ---------------------------
def render_customers(client: InventoryApiClient):
    st.title("Customers")
    show_notice()
    view = _view("customer_view", lambda: CustomerView(client))
    _load(view, "customers")

    with st.form("add_customer", clear_on_submit=True):
        st.subheader("Add Customer")
        form = {
            "firstName": st.text_input("First Name"),
            "lastName": st.text_input("Last Name"),
            "gender": st.text_input("Gender"),
            "address": st.text_input("Address"),
        }
        submitted = st.form_submit_button("Add Customer")

    if submitted:
        missing = missing_profile_fields(form)
        if missing:
            st.warning(f"{INCOMPLETE_WARNING} Missing: {', '.join(missing)}")
        else:
            try:
                view.add(form["firstName"], form["lastName"], form["gender"], form["address"])
                notify("success", "The customer has been added successfully!")
            except ApiClientError as e:
                logger.error(f"Error adding customer: {e.message}")
                notify("error", f"An error occurred while adding the customer: {e.message}")
            st.rerun()

    st.subheader("Customer List")
    if not view.records:
        st.info("No customers yet.")
        return

    table = pd.DataFrame([
        {
            "Full Name": f"{p['firstName']} {p['lastName']}",
            "Gender": p["gender"],
            "Address": p["address"]
        }
        for p in view.records
    ])
    st.dataframe(table, hide_index=True, use_container_width=True)

    labels = {p["id"]: f"{p['firstName']} {p['lastName']} ({p['address']})" for p in view.records}
    selected = st.selectbox("Customer", list(labels), format_func=labels.get)
    confirm = st.checkbox("I understand this customer cannot be recovered")
    if st.button("Remove", disabled=not confirm):
        try:
            notify("success", view.delete(selected) or "The customer has been deleted.")
        except ApiClientError as e:
            logger.error(f"Error removing customer: {e.message}")
            notify("error", f"An error occurred while deleting the customer: {e.message}")
        st.rerun()


# ---------------------------
# Chat
# ---------------------------
def render_chat(client: InventoryApiClient = None):
    st.title("Chat for Canvassers")
    selected = st.sidebar.radio("Canvasser", CORRESPONDENTS, key="chat_correspondent")
    st.subheader(f"Chat with {selected}")

    for message in messages_for(selected):
        role = "user" if message["sender"] == ME else "assistant"
        with st.chat_message(role):
            st.caption(message["sender"])
            st.write(message["text"])

    # Mock input only; messages are not sent anywhere
    st.chat_input("Type your message here...")
