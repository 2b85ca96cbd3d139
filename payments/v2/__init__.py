"""Payments v2 endpoints: checkout orders."""
