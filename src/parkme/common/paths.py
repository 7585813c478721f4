"""Path helpers shared by the CLI and the setup pipeline."""

from __future__ import annotations

import os
from pathlib import Path, PurePath

from parkme.constants import APP_NAME


def resolve_working_directory(working_dir: Path | None) -> Path:
    base = working_dir or Path.cwd()
    if base.is_file():
        base = base.parent
    try:
        return base.resolve(strict=False)
    except OSError:
        return base


def get_data_directory(app_name: str = APP_NAME) -> Path:
    """Get XDG data directory for the application.

    Returns ~/.local/share/{app_name} (or XDG_DATA_HOME/{app_name} if set).
    """
    xdg_data = os.getenv("XDG_DATA_HOME")
    base_dir = Path(xdg_data).expanduser() if xdg_data else Path.home() / ".local" / "share"
    return base_dir / app_name


def to_forward_slashes(path: PurePath | str) -> str:
    return str(path).replace("\\", "/")
