"""Dependency installation inside the cloned application."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path

from result import Err, Ok, Result

from parkme.common import create_logger
from parkme.utils.process import run_streaming

from .models import DependencyInstallError

logger = create_logger("installer")


def install_dependencies(
    command: Sequence[str],
    app_dir: Path,
    *,
    env: Mapping[str, str] | None = None,
) -> Result[None, DependencyInstallError]:
    """Run the install command in ``app_dir`` with output streamed to the console."""
    logger.info("Installing dependencies", command=list(command), cwd=str(app_dir))

    try:
        returncode = run_streaming(command, cwd=app_dir, env=env)
    except FileNotFoundError:
        return Err(DependencyInstallError(command=list(command), message=f"{command[0]} command not found"))
    except OSError as e:
        return Err(DependencyInstallError(command=list(command), message=f"Failed to run {command[0]}: {e}"))

    if returncode != 0:
        return Err(
            DependencyInstallError(
                command=list(command),
                returncode=returncode,
                message=f"'{' '.join(command)}' exited with code {returncode}",
            )
        )

    return Ok(None)
