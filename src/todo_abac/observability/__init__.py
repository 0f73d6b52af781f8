"""Observability – logging and audit trail."""
