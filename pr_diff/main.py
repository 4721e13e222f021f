import importlib.util
import sys
from pathlib import Path

import uvicorn
from fastapi import Depends, FastAPI

from pr_diff.apps.api import router
from pr_diff.apps.api.router import get_git_service as router_get_git_service
from pr_diff.config.settings import Settings, get_settings
from pr_diff.protocols.git_service_protocol import GitServiceProtocol

settings = get_settings()

# --- Dependencies ---


def get_mock_git_service(
    settings: Settings = Depends(get_settings),
) -> GitServiceProtocol:
    """Return the MockGitService used in DEBUG mode."""
    # Importable once the DEBUG block below has put dev/ on sys.path
    from mocks.git_service import MockGitService

    print("🔧 DEBUG mode: Using MockGitService (via DI Override)")
    return MockGitService(repo_path=settings.REPO_PATH)


# --- Application ---

app = FastAPI(
    title="Local PR Diff API",
    version="0.1.0",
    description="Collects file-level changes between two git branches",
)

# --- DEBUG dependency overrides ---

if settings.DEBUG:
    dev_path = Path(__file__).parent.parent / "dev"
    if dev_path.exists():
        sys.path.append(str(dev_path))
        print("🔧 'dev' directory added to sys.path for mock imports.")
        if importlib.util.find_spec("mocks.git_service") is not None:
            app.dependency_overrides[router_get_git_service] = get_mock_git_service
        else:
            print("⚠️ MockGitService not found, falling back to ProcessGitService.")
    else:
        print("⚠️ 'dev' directory not found. Using ProcessGitService.")

app.include_router(router.router, prefix="/api")


@app.get("/health")
async def health_check():
    """
    Simple health check endpoint to confirm the API is running.
    """
    return {"status": "ok"}


def run() -> None:
    """Serve the API with uvicorn on the configured host and port."""
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
