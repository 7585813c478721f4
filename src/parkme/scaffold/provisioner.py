"""Data directory provisioning."""

from __future__ import annotations

import shutil
from collections.abc import Sequence
from pathlib import Path

from result import Err, Ok, Result

from parkme.common import create_logger
from parkme.constants import DATA_FILES

from .models import DataProvisionError

logger = create_logger("provisioner")


def provision_data(
    templates_dir: Path,
    data_dir: Path,
    *,
    file_names: Sequence[str] = DATA_FILES,
) -> Result[dict[str, Path], DataProvisionError]:
    """Create ``data_dir`` and copy each template file into it unchanged.

    Returns a mapping of file name to the copied file's path.
    """
    try:
        data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        return Err(DataProvisionError(path=data_dir, message=f"Failed to create data directory: {e}"))

    copied: dict[str, Path] = {}
    for file_name in file_names:
        source = templates_dir / file_name
        destination = data_dir / file_name
        try:
            shutil.copyfile(source, destination)
        except OSError as e:
            return Err(DataProvisionError(path=source, message=f"Failed to copy {file_name}: {e}"))
        logger.debug("Copied data template", source=str(source), destination=str(destination))
        copied[file_name] = destination

    return Ok(copied)
