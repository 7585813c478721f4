"""Application repository fetcher."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from result import Err, Result

from parkme.common import create_logger
from parkme.settings import RepositorySettings
from parkme.utils.git import clone_repository

from .models import RepositoryFetchError

logger = create_logger("fetcher")


def fetch_repository(
    repository: RepositorySettings,
    app_dir: Path,
    *,
    env: Mapping[str, str] | None = None,
) -> Result[Path, RepositoryFetchError]:
    """Clone the configured repository branch into ``app_dir``."""
    logger.info("Cloning repository", url=repository.url, branch=repository.branch, destination=str(app_dir))

    try:
        app_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        return Err(
            RepositoryFetchError(
                url=repository.url,
                branch=repository.branch,
                message=f"Failed to create {app_dir}: {e}",
            )
        )

    result = clone_repository(
        repository.url,
        app_dir,
        branch=repository.branch,
        depth=repository.depth,
        env=env,
    )

    return result.map_err(
        lambda err: RepositoryFetchError(url=repository.url, branch=repository.branch, message=err.message)
    )
