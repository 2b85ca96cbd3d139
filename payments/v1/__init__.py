"""Payments v1 endpoints: payments, authorizations, captures, sales, refunds."""
