"""
Streamlit dashboard for the inventory admin API.
Contains the HTTP client, the per-page view state and the mock chat data.
"""
