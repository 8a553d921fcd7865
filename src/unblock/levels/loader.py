"""Level file loading."""

import logging
from pathlib import Path

from unblock.game.level import Level
from unblock.levels.parser import parse_levels

logger = logging.getLogger(__name__)

LEVELS_FILENAME = "levels.dat"


def default_levels_path() -> Path:
    """Path of the level file shipped with the package."""
    return Path(__file__).resolve().parent.parent / "data" / LEVELS_FILENAME


def resolve_levels_path(path: Path | str | None) -> Path:
    """Resolve a level file location.

    A directory means the levels.dat inside it; None means the bundled levels.
    """
    if path is None:
        return default_levels_path()
    path = Path(path)
    if path.is_dir():
        return path / LEVELS_FILENAME
    return path


def load_level_file(path: Path | str | None = None) -> list[Level]:
    """Read and parse a level file.

    Raises:
        OSError: If the file cannot be read
        ParseError: If a level in the file is malformed
    """
    resolved = resolve_levels_path(path)
    logger.info(f"Loading levels from {resolved}")
    return parse_levels(resolved.read_bytes(), source=str(resolved))
