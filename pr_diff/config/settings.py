from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Branch names are supplied per request; the repository location, the
    fallback base branch and the server address are configured here.
    """

    # Any path inside the repository; the work tree root is resolved from it
    REPO_PATH: str = "."
    DEFAULT_BASE_BRANCH: str = "master"

    # Server bind address for `pr-diff-server`
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # Development and debugging
    DEBUG: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
