"""Factory for creating git service instances with DEBUG mode support."""

from pathlib import Path
from typing import Union

from git import Repo
from git.exc import InvalidGitRepositoryError, NoSuchPathError

from ..config.settings import Settings
from ..exceptions import GitException
from ..models import ProcessGitService
from ..protocols.git_service_protocol import GitServiceProtocol


def resolve_repository_root(repo_path: Union[str, Path]) -> Path:
    """
    Find the repository that contains repo_path.

    Returns the work tree root, or the git directory for bare repositories.

    Raises:
        GitException: repo_path is not inside a git repository
    """
    try:
        repo = Repo(repo_path, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError) as e:
        raise GitException(f"Not a git repository: {repo_path}", e) from e

    try:
        return Path(repo.working_tree_dir or repo.git_dir)
    finally:
        repo.close()


def create_git_service(
    repo_path: Union[str, Path] = ".",
    debug_mode: bool = False,
) -> GitServiceProtocol:
    """
    Create a git service based on debug mode.

    Args:
        repo_path: Any path inside the repository
        debug_mode: If True, returns MockGitService; if False, returns ProcessGitService

    Returns:
        GitServiceProtocol implementation
    """
    if debug_mode:
        print("🔧 DEBUG mode: Using MockGitService")
        # Lazy import, the dev directory is only on sys.path in DEBUG mode
        try:
            from mocks.git_service import MockGitService

            return MockGitService(repo_path)
        except ImportError:
            print("⚠️  MockGitService not available, falling back to ProcessGitService")

    print("🌐 Production mode: Using ProcessGitService")
    return ProcessGitService(resolve_repository_root(repo_path))


def create_git_service_from_settings(settings: Settings) -> GitServiceProtocol:
    """
    Create a git service using application settings.

    Args:
        settings: Application settings

    Returns:
        GitServiceProtocol implementation
    """
    return create_git_service(
        repo_path=settings.REPO_PATH,
        debug_mode=settings.DEBUG,
    )
