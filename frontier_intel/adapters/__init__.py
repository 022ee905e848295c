"""Adapters connecting intel records to external systems (Discord)."""
