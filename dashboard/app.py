# Core Python imports
import logging

# Web framework
import streamlit as st

from inventory_dashboard.client import InventoryApiClient
from inventory_dashboard.config import api_url, request_timeout
from inventory_dashboard.pages import render_chat, render_customers, render_overview, render_products

logging.basicConfig(level=logging.INFO)

st.set_page_config(page_title="Inventory Admin", layout="wide")

# Initialize session state
if "api_client" not in st.session_state:
    st.session_state.api_client = InventoryApiClient(api_url(), timeout=request_timeout())
if "editing_product" not in st.session_state:
    st.session_state.editing_product = None
if "deleting_product" not in st.session_state:
    st.session_state.deleting_product = None

PAGES = {
    "Dashboard": render_overview,
    "Products": render_products,
    "Customers": render_customers,
    "Chat": render_chat,
}

st.sidebar.title("Inventory Admin")
page = st.sidebar.radio("Go to", list(PAGES), key="page")
st.sidebar.caption(f"API: {st.session_state.api_client.base_url}")

PAGES[page](st.session_state.api_client)
