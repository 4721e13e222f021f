"""Mock implementation of GitServiceProtocol for development and testing."""

from pathlib import Path
from typing import List, Union

from pr_diff.schemas import ChangeType, CodeChange


class MockGitService:
    """Mock implementation of GitServiceProtocol that never spawns git."""

    def __init__(self, repo_path: Union[str, Path] = "."):
        self._repo_path = Path(repo_path)

    @property
    def repo_path(self) -> Path:
        return self._repo_path

    def get_diff_between_branches(
        self, base_branch: str, compare_branch: str
    ) -> List[CodeChange]:
        """Canned diff: one added, one modified and one deleted file."""
        print(f"Mock: Diffing {base_branch}...{compare_branch}")
        if base_branch == compare_branch:
            return []

        return [
            CodeChange(
                file_path="existing.txt",
                old_content="hello\n",
                new_content="hello\nworld\n",
                change_type=ChangeType.MODIFIED,
            ),
            CodeChange(
                file_path="new.txt",
                new_content="brand new\n",
                change_type=ChangeType.ADDED,
            ),
            CodeChange(
                file_path="old.txt",
                old_content="going away\n",
                change_type=ChangeType.DELETED,
            ),
        ]
