from pathlib import Path
from typing import Dict, Iterable, Optional

import pytest
from git import Repo


def commit_files(
    repo: Repo,
    message: str,
    write: Optional[Dict[str, bytes]] = None,
    remove: Iterable[str] = (),
) -> None:
    """Write and delete files in the work tree, then commit them."""
    root = Path(repo.working_tree_dir)
    write = write or {}
    for name, content in write.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
    if write:
        repo.index.add(list(write))
    if remove:
        repo.index.remove(list(remove), working_tree=True)
    repo.index.commit(message)


@pytest.fixture
def git_repo(tmp_path):
    """
    Repository with a `master` branch and a `feature/x` branch.

    feature/x adds new.txt, modifies existing.txt and deletes old.txt.
    """
    repo = Repo.init(tmp_path)
    with repo.config_writer() as config:
        config.set_value("user", "name", "Test Author")
        config.set_value("user", "email", "test@example.com")
        config.set_value("core", "autocrlf", "false")

    commit_files(
        repo,
        "Initial commit",
        write={
            "existing.txt": b"hello\n",
            "old.txt": b"this file\nis going\naway soon\n",
        },
    )
    repo.git.branch("-M", "master")

    repo.create_head("feature/x").checkout()
    commit_files(
        repo,
        "Feature work",
        write={
            "existing.txt": b"hello\nworld\n",
            "new.txt": b"0123456789\nabcdefghij\n",
        },
        remove=["old.txt"],
    )
    repo.heads.master.checkout()

    yield repo
    repo.close()


@pytest.fixture
def commit():
    """Helper to write/delete files and commit them in a repository."""
    return commit_files
