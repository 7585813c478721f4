"""Project name and target directory collection."""

from __future__ import annotations

import shutil
from pathlib import Path

from parkme.common import create_logger
from parkme.constants import DEFAULT_PROJECT_NAME

from .models import ProjectLayout
from .protocol import Prompter

logger = create_logger("collector")


def collect_project(
    prompter: Prompter,
    working_dir: Path,
    *,
    default_name: str = DEFAULT_PROJECT_NAME,
) -> ProjectLayout | None:
    """Ask for the project name and clear the target directory if needed.

    Returns None when the target already exists and the user declines to
    overwrite it; nothing on disk is touched in that case. Errors while
    removing an existing target are not caught.
    """
    name = prompter.ask_project_name(default_name).strip() or default_name
    layout = ProjectLayout.from_name(name, working_dir)

    if layout.target_dir.exists():
        if not prompter.confirm_overwrite(name):
            logger.info("Overwrite declined", target=str(layout.target_dir))
            return None
        logger.info("Removing existing target directory", target=str(layout.target_dir))
        _remove(layout.target_dir)

    return layout


def _remove(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()
