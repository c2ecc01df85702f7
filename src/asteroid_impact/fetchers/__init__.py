"""Fetchers for external asteroid data sources."""
