"""Git utility functions."""

from __future__ import annotations

import subprocess
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel
from result import Err, Ok, Result


class GitError(BaseModel):
    """Base error for git operations."""

    message: str


class GitNotInstalledError(GitError):
    """Git command not found."""

    pass


class GitCloneError(GitError):
    """Failed to clone repository."""

    url: str
    branch: str | None = None


def build_clone_command(
    url: str,
    destination: Path,
    *,
    branch: str | None = None,
    depth: int | None = None,
) -> list[str]:
    command = ["git", "clone"]
    if branch:
        command += ["--branch", branch]
    if depth is not None:
        command += ["--depth", str(depth)]
    return [*command, url, str(destination)]


def clone_repository(
    url: str,
    destination: Path,
    *,
    branch: str | None = None,
    depth: int | None = None,
    env: Mapping[str, str] | None = None,
) -> Result[Path, GitError]:
    """Clone ``url`` into ``destination``.

    The destination may already exist as long as it is empty, git refuses
    anything else.
    """
    if destination.exists() and any(destination.iterdir()):
        return Err(GitCloneError(url=url, branch=branch, message=f"Destination is not empty: {destination}"))

    try:
        destination.parent.mkdir(parents=True, exist_ok=True)

        subprocess.run(
            build_clone_command(url, destination, branch=branch, depth=depth),
            capture_output=True,
            text=True,
            check=True,
            env=dict(env) if env is not None else None,
        )

        return Ok(destination)

    except FileNotFoundError:
        return Err(GitNotInstalledError(message="git command not found. Please install git."))
    except subprocess.CalledProcessError as e:
        stderr = e.stderr.strip() if e.stderr else "Unknown error"
        return Err(GitCloneError(url=url, branch=branch, message=f"Failed to clone repository: {stderr}"))
    except OSError as e:
        return Err(GitCloneError(url=url, branch=branch, message=f"Unexpected error cloning repository: {e}"))
