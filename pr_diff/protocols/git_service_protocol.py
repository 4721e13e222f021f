"""Git service protocol interface."""

from pathlib import Path
from typing import List, Protocol, runtime_checkable

from ..schemas import CodeChange


@runtime_checkable
class GitServiceProtocol(Protocol):
    """Protocol for collecting changes between two branches."""

    @property
    def repo_path(self) -> Path:
        """Repository work tree the service operates on."""
        ...

    def get_diff_between_branches(
        self, base_branch: str, compare_branch: str
    ) -> List[CodeChange]:
        """Get changed files between base_branch...compare_branch, in listing order."""
        ...
