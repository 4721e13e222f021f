from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException

from pr_diff.config.settings import Settings, get_settings
from pr_diff.exceptions import GitException
from pr_diff.protocols.git_service_protocol import GitServiceProtocol
from pr_diff.schemas import CodeChange
from pr_diff.services import create_git_service

router = APIRouter(prefix="/diff", tags=["diff"])


def get_git_service(settings: Settings = Depends(get_settings)) -> GitServiceProtocol:
    """Create the git service for a request."""
    try:
        return create_git_service(repo_path=settings.REPO_PATH)
    except GitException as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to initialize git service: {e.describe()}",
        )


def _collect_changes(
    service: GitServiceProtocol, base: str, compare: str
) -> List[CodeChange]:
    if not base.strip() or not compare.strip():
        raise HTTPException(
            status_code=400, detail="Branch names cannot be empty"
        )
    # git would parse these as options
    if base.startswith("-") or compare.startswith("-"):
        raise HTTPException(status_code=400, detail="Invalid branch name")

    try:
        return service.get_diff_between_branches(base, compare)
    except GitException as e:
        raise HTTPException(status_code=500, detail=f"Diff failed: {e.describe()}")


@router.get("", response_model=List[CodeChange])
def get_diff(
    compare: str,
    base: Optional[str] = None,
    settings: Settings = Depends(get_settings),
    service: GitServiceProtocol = Depends(get_git_service),
):
    """Changed files between base...compare with their content on both sides."""
    return _collect_changes(service, base or settings.DEFAULT_BASE_BRANCH, compare)


@router.get("/files", response_model=List[Dict[str, Any]])
def list_changed_files(
    compare: str,
    base: Optional[str] = None,
    settings: Settings = Depends(get_settings),
    service: GitServiceProtocol = Depends(get_git_service),
):
    """Changed file paths and their change types, without content."""
    changes = _collect_changes(
        service, base or settings.DEFAULT_BASE_BRANCH, compare
    )
    return [
        {"file_path": change.file_path, "change_type": change.change_type.value}
        for change in changes
    ]


@router.get("/health")
async def diff_health_check():
    """Simple health check for diff endpoints."""
    return {"status": "diff endpoints available"}
