from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

from result import Err, Ok, is_err, is_ok

from parkme.scaffold import RepositoryFetchError, fetch_repository
from parkme.settings import RepositorySettings
from parkme.utils.git import GitCloneError, GitNotInstalledError


def test_creates_app_dir_and_clones_configured_branch(tmp_path: Path) -> None:
    app_dir = tmp_path / "demo" / "app"
    repository = RepositorySettings()

    with patch("parkme.scaffold.fetcher.clone_repository", return_value=Ok(app_dir)) as mock_clone:
        result = fetch_repository(repository, app_dir, env={"HOME": "/tmp"})

    assert is_ok(result)
    assert app_dir.is_dir()
    mock_clone.assert_called_once_with(
        "https://github.com/IT24102532/parkingManagement.git",
        app_dir,
        branch="master",
        depth=None,
        env={"HOME": "/tmp"},
    )


def test_maps_clone_error(tmp_path: Path) -> None:
    repository = RepositorySettings(url="https://example.com/repo.git", branch="develop", depth=1)
    error = GitCloneError(url=repository.url, branch="develop", message="Failed to clone repository: timeout")

    with patch("parkme.scaffold.fetcher.clone_repository", return_value=Err(error)):
        result = fetch_repository(repository, tmp_path / "app")

    assert is_err(result)
    fetch_error = result.unwrap_err()
    assert isinstance(fetch_error, RepositoryFetchError)
    assert fetch_error.url == "https://example.com/repo.git"
    assert fetch_error.branch == "develop"
    assert "timeout" in fetch_error.message


def test_maps_missing_git(tmp_path: Path) -> None:
    error = GitNotInstalledError(message="git command not found. Please install git.")

    with patch("parkme.scaffold.fetcher.clone_repository", return_value=Err(error)):
        result = fetch_repository(RepositorySettings(), tmp_path / "app")

    assert is_err(result)
    assert "git command not found" in result.unwrap_err().message


def test_app_dir_creation_failure(tmp_path: Path) -> None:
    blocker = tmp_path / "demo"
    blocker.write_text("file in the way")

    with patch("parkme.scaffold.fetcher.clone_repository") as mock_clone:
        result = fetch_repository(RepositorySettings(), blocker / "app")

    assert is_err(result)
    assert "Failed to create" in result.unwrap_err().message
    mock_clone.assert_not_called()
