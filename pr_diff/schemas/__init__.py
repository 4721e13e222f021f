"""Schemas for the application."""

from .code_change import ChangeType, CodeChange

__all__ = ["ChangeType", "CodeChange"]
