"""Adapters binding application ports to concrete libraries."""
