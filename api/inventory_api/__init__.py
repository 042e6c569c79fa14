"""Inventory admin REST API."""
