"""
Exceptions raised while running git and assembling diffs.
"""

from typing import Optional


class CommandError(Exception):
    """Base class for failures of an external command."""

    def __init__(self, command: str, message: str):
        self.command = command
        super().__init__(message)


class CommandTimeoutError(CommandError):
    """The command did not finish in time and was killed."""

    def __init__(self, command: str, timeout: float):
        self.timeout = timeout
        super().__init__(command, f"Command timed out: {command}")


class CommandFailedError(CommandError):
    """The command exited with a non-zero status (or could not be started)."""

    def __init__(self, command: str, stderr: str, returncode: Optional[int] = None):
        self.stderr = stderr
        self.returncode = returncode
        super().__init__(command, f"Command failed: {command}\nError: {stderr}")


class GitException(Exception):
    """
    Domain-level failure reported to callers of the git service.

    Any error raised while collecting a diff is wrapped into this exception,
    the original error stays available as ``cause`` (and ``__cause__``).
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.message = message
        self.cause = cause
        super().__init__(message)

    def describe(self) -> str:
        """Message followed by the underlying error, if any."""
        if self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"
