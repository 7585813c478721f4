"""Advisory check for the servlet runtime the application deploys to."""

from __future__ import annotations

import subprocess
from collections.abc import Mapping

from parkme.common import create_logger
from parkme.settings import RuntimeSettings
from parkme.utils.process import run_quiet

from .models import PrerequisiteStatus

logger = create_logger("prerequisite")


def is_windows(platform: str) -> bool:
    return platform.startswith("win")


def runtime_command(runtime: RuntimeSettings, platform: str) -> list[str]:
    return list(runtime.windows_command if is_windows(platform) else runtime.posix_command)


def check_prerequisite(
    runtime: RuntimeSettings,
    *,
    platform: str,
    env: Mapping[str, str] | None = None,
) -> PrerequisiteStatus:
    """Run the runtime's version command. Never fails, only reports."""
    command = runtime_command(runtime, platform)

    try:
        installed = run_quiet(command, env=env) == 0
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("Runtime check could not run", command=command, error=str(e))
        installed = False

    logger.info("Runtime check finished", runtime=runtime.name, installed=installed)
    return PrerequisiteStatus(
        name=runtime.name,
        installed=installed,
        command=command,
        install_url=runtime.install_url,
    )
