"""Clients for external data sources."""
