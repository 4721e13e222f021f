"""Collects file-level changes between two git branches."""
