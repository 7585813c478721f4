"""config.properties rendering."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path, PurePath

from result import Err, Ok, Result

from parkme.common import create_logger, to_forward_slashes

from .models import ConfigRenderError

logger = create_logger("renderer")

# Placeholder token -> data file it points to
PLACEHOLDERS: dict[str, str] = {
    "%%user.file.path%%": "users.json",
    "%%booking.file.path%%": "bookings.json",
    "%%transaction.file.path%%": "transactions.json",
    "%%slots.file.path%%": "parkingSlots.json",
}


def build_replacements(data_files: Mapping[str, PurePath]) -> dict[str, str]:
    """Map every placeholder token to the absolute, forward-slash path of its data file."""
    return {token: to_forward_slashes(_absolute(data_files[file_name])) for token, file_name in PLACEHOLDERS.items()}


def _absolute(path: PurePath) -> PurePath:
    return path if path.is_absolute() else Path(path).absolute()


def render_template(template: str, replacements: Mapping[str, str]) -> str:
    """Replace the first occurrence of each token. Absent tokens are skipped."""
    rendered = template
    for token, value in replacements.items():
        rendered = rendered.replace(token, value, 1)
    return rendered


def missing_placeholders(template: str, replacements: Mapping[str, str]) -> list[str]:
    return [token for token in replacements if token not in template]


def write_config(
    template_path: Path,
    data_files: Mapping[str, Path],
    destination: Path,
) -> Result[Path, ConfigRenderError]:
    """Render ``template_path`` against ``data_files`` and write it to ``destination``."""
    try:
        template = template_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return Err(ConfigRenderError(path=template_path, message=f"Failed to read config template: {e}"))

    replacements = build_replacements(data_files)
    if missing := missing_placeholders(template, replacements):
        logger.warning("Config template is missing placeholders", template=str(template_path), missing=missing)

    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(render_template(template, replacements), encoding="utf-8")
    except OSError as e:
        return Err(ConfigRenderError(path=destination, message=f"Failed to write config: {e}"))

    logger.info("Config written", destination=str(destination))
    return Ok(destination)
