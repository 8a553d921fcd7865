"""Level files.

Provides:
- Parsing of the level text format into validated levels
- Loading level files from disk (including the bundled levels)
- Sequencing through a level list with a live board
"""

from unblock.levels.loader import (
    LEVELS_FILENAME,
    default_levels_path,
    load_level_file,
    resolve_levels_path,
)
from unblock.levels.parser import (
    IncompleteLevelLineError,
    InvalidBlockLengthError,
    InvalidCharacterError,
    InvalidExitError,
    MissingPlayerError,
    MissingWallError,
    MultiplePlayersError,
    ParseError,
    Tile,
    format_level,
    parse_level_string,
    parse_levels,
)
from unblock.levels.sequencer import LevelSequencer

__all__ = [
    # Parser
    "parse_levels",
    "parse_level_string",
    "format_level",
    "Tile",
    # Errors
    "ParseError",
    "InvalidBlockLengthError",
    "MissingPlayerError",
    "MultiplePlayersError",
    "InvalidExitError",
    "MissingWallError",
    "InvalidCharacterError",
    "IncompleteLevelLineError",
    # Loader
    "LEVELS_FILENAME",
    "default_levels_path",
    "load_level_file",
    "resolve_levels_path",
    # Sequencer
    "LevelSequencer",
]
