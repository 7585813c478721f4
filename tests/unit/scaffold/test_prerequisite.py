from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from parkme.scaffold import check_prerequisite
from parkme.scaffold.prerequisite import runtime_command
from parkme.settings import RuntimeSettings


@pytest.mark.parametrize(
    ("platform", "expected"),
    [
        ("win32", ["catalina.bat", "version"]),
        ("linux", ["catalina", "version"]),
        ("darwin", ["catalina", "version"]),
    ],
)
def test_command_depends_on_platform(platform: str, expected: list[str]) -> None:
    assert runtime_command(RuntimeSettings(), platform) == expected


def test_reports_installed_runtime() -> None:
    with patch("parkme.scaffold.prerequisite.run_quiet", return_value=0) as mock_run:
        status = check_prerequisite(RuntimeSettings(), platform="linux", env={"PATH": "/opt/tomcat/bin"})

    assert status.installed is True
    assert status.name == "Tomcat"
    assert status.command == ["catalina", "version"]
    mock_run.assert_called_once_with(["catalina", "version"], env={"PATH": "/opt/tomcat/bin"})


def test_missing_runtime_is_not_an_error() -> None:
    with patch("parkme.scaffold.prerequisite.run_quiet", side_effect=FileNotFoundError):
        status = check_prerequisite(RuntimeSettings(), platform="win32")

    assert status.installed is False
    assert status.command == ["catalina.bat", "version"]
    assert status.install_url == "https://tomcat.apache.org/download-90.cgi"


@pytest.mark.parametrize("outcome", [1, PermissionError("denied"), subprocess.SubprocessError("boom")])
def test_failures_report_not_installed(outcome: object) -> None:
    kwargs = {"side_effect": outcome} if isinstance(outcome, Exception) else {"return_value": outcome}

    with patch("parkme.scaffold.prerequisite.run_quiet", **kwargs):
        status = check_prerequisite(RuntimeSettings(), platform="linux")

    assert status.installed is False


@pytest.mark.skipif(sys.platform.startswith("win"), reason="POSIX executable lookup")
def test_runtime_is_looked_up_on_the_given_path(tmp_path: Path) -> None:
    bin_dir = tmp_path / "tomcat" / "bin"
    bin_dir.mkdir(parents=True)
    catalina = bin_dir / "catalina"
    catalina.write_text("#!/bin/sh\nexit 0\n")
    catalina.chmod(0o755)
    runtime = RuntimeSettings()

    assert check_prerequisite(runtime, platform="linux", env={"PATH": str(bin_dir)}).installed is True
    assert check_prerequisite(runtime, platform="linux", env={"PATH": str(tmp_path)}).installed is False
