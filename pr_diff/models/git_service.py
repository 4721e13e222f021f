import re
from pathlib import Path
from typing import List, Optional, Union

from ..exceptions import GitException
from ..schemas import ChangeType, CodeChange
from .command_runner import CommandRunner

GIT = "git"


class ProcessGitService:
    """Builds the list of changed files between two branches by invoking git."""

    def __init__(
        self,
        repo_path: Union[str, Path] = ".",
        runner: Optional[CommandRunner] = None,
    ):
        self._repo_path = Path(repo_path)
        self.runner = runner or CommandRunner(cwd=self._repo_path)

    @property
    def repo_path(self) -> Path:
        return self._repo_path

    def get_diff_between_branches(
        self, base_branch: str, compare_branch: str
    ) -> List[CodeChange]:
        """
        Collect every file changed on compare_branch since it forked from base_branch.

        The result follows the order of `git diff --name-status base...compare`.
        Either the complete list is returned or GitException is raised.
        """
        try:
            changed_files = self._get_changed_files(base_branch, compare_branch)

            changes = []
            for file_path in changed_files:
                change_type = self.determine_change_type(
                    base_branch, compare_branch, file_path
                )
                old_content = ""
                new_content = ""

                if change_type != ChangeType.ADDED:
                    old_content = self.get_file_content(base_branch, file_path)
                if change_type != ChangeType.DELETED:
                    new_content = self.get_file_content(compare_branch, file_path)

                changes.append(
                    CodeChange(
                        file_path=file_path,
                        old_content=old_content,
                        new_content=new_content,
                        change_type=change_type,
                    )
                )
        except Exception as e:
            raise GitException("Failed to get diff between branches", e) from e

        print(
            f"Collected {len(changes)} change(s) between "
            f"{base_branch}...{compare_branch}"
        )
        return changes

    def _get_changed_files(self, base_branch: str, compare_branch: str) -> List[str]:
        output = self.runner.execute(
            [GIT, "diff", "--name-status", f"{base_branch}...{compare_branch}"]
        )
        # Each line is "<status>\t<path>"; drop the status and the separator
        return [line[2:] for line in output.splitlines() if line]

    def determine_change_type(
        self, base_branch: str, compare_branch: str, file_path: str
    ) -> ChangeType:
        """Classify a single file by its name-status letter."""
        output = self.runner.execute(
            [
                GIT,
                "diff",
                "--name-status",
                f"{base_branch}...{compare_branch}",
                "--",
                file_path,
            ]
        )
        lines = output.splitlines()
        if not lines or not lines[0]:
            return ChangeType.MODIFIED

        status = lines[0][0]
        if status == "A":
            return ChangeType.ADDED
        if status == "D":
            return ChangeType.DELETED
        # R, C, T, M and anything else
        return ChangeType.MODIFIED

    def get_file_content(self, branch: str, file_path: str) -> str:
        """
        Return the file content at a branch, every line terminated by "\\n".

        Raises CommandFailedError when the file does not exist on that branch.
        """
        output = self.runner.execute([GIT, "show", f"{branch}:{file_path}"])
        return _normalize_line_endings(output)


def _normalize_line_endings(text: str) -> str:
    text = re.sub(r"\r\n?", "\n", text)
    if text and not text.endswith("\n"):
        text += "\n"
    return text
