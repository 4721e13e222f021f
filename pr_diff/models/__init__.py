"""Models for the application."""

from .command_runner import COMMAND_TIMEOUT_SECONDS, CommandRunner
from .git_service import ProcessGitService

__all__ = ["COMMAND_TIMEOUT_SECONDS", "CommandRunner", "ProcessGitService"]
