"""Pydantic request schemas (camelCase on the wire)."""
