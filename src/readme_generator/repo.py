import asyncio
import logging
import re
from pathlib import Path
from urllib.parse import urlparse

from git import Repo
from git.exc import GitError

from readme_generator import config

logger = logging.getLogger(__name__)

CLONE_FAILED_MESSAGE = "Failed to clone repository. Check the URL and make sure the repository is public."
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


class RepoError(Exception):
    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class InvalidRepoUrlError(RepoError):
    def __init__(self, message: str = "Invalid repository URL provided."):
        super().__init__(message, status_code=400)


class CloneError(RepoError):
    def __init__(self, message: str = CLONE_FAILED_MESSAGE):
        super().__init__(message, status_code=500)


def validate_repo_url(url: str) -> str:
    url = url.strip()
    if _CONTROL_CHARS.search(url):
        raise InvalidRepoUrlError("Invalid repository URL provided. The URL contains control characters.")
    try:
        parsed = urlparse(url)
    except ValueError as exc:
        raise InvalidRepoUrlError(f"Invalid repository URL provided. {exc}.") from exc
    if parsed.scheme not in ("http", "https"):
        raise InvalidRepoUrlError("Invalid repository URL provided. Expected an http:// or https:// URL.")
    if not parsed.hostname:
        raise InvalidRepoUrlError("Invalid repository URL provided. The URL has no host.")
    return url


def _clone_env(cfg: config.CloneConfig) -> dict[str, str]:
    return {
        # Private repos must fail, not block on a credential prompt
        "GIT_TERMINAL_PROMPT": "0",
        "GIT_HTTP_LOW_SPEED_LIMIT": str(cfg.low_speed_limit),
        "GIT_HTTP_LOW_SPEED_TIME": str(cfg.stall_timeout),
    }


async def clone_repository(url: str, dest: Path, cfg: config.CloneConfig) -> None:
    logger.info(f"Cloning {url} into {dest} (depth={cfg.depth})")
    try:
        await asyncio.to_thread(
            Repo.clone_from, url, str(dest), env=_clone_env(cfg), depth=cfg.depth,
        )
    except GitError as exc:
        logger.error(f"git clone of {url} failed: {exc}")
        raise CloneError() from exc
    logger.info("Repository cloned")
