"""Services for the application."""

from .git_service_factory import (
    create_git_service,
    create_git_service_from_settings,
    resolve_repository_root,
)

__all__ = [
    "create_git_service",
    "create_git_service_from_settings",
    "resolve_repository_root",
]
