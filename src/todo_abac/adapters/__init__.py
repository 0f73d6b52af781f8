"""Adapters – integrations with external frameworks."""
