"""Pytest configuration and fixtures."""

import os

import pytest

# Keep tests independent of any local .env level settings - must happen before settings import
os.environ.pop("UNBLOCK_LEVELS_PATH", None)

from unblock.game.level import Level  # noqa: E402
from unblock.levels.parser import parse_level_string  # noqa: E402
from unblock.settings import get_settings  # noqa: E402

get_settings.cache_clear()


# Player at (2,0)-(2,1), exit at (2,6), nothing in the way
OPEN_ROW = """
&&&&&&&&
&******&
&******&
&==****^
&******&
&******&
&******&
&&&&&&&&
"""

# Same, with a vertical block on (1,3)-(2,3)
BLOCKED_ROW = """
&&&&&&&&
&******&
&***|**&
&==*|**^
&******&
&******&
&******&
&&&&&&&&
"""

# Blocks touching end to end on both axes
ALTERNATING = """
&&&&&&&&
&--__**&
&|****(&
&|==**(^
&(****|&
&(****|&
&******&
&&&&&&&&
"""

# Eight blocks of both lengths on both axes
CLASSIC = """
&&&&&&&&
&---**|&
&**|**|&
&==|**|^
&|*|*--&
&|***|*&
&---*|*&
&&&&&&&&
"""


@pytest.fixture
def open_row_level() -> Level:
    """Level with a clear path from the player to the exit."""
    return parse_level_string(OPEN_ROW)


@pytest.fixture
def blocked_row_level() -> Level:
    """Level with a vertical block in the player's row."""
    return parse_level_string(BLOCKED_ROW)


@pytest.fixture
def alternating_level() -> Level:
    """Level using both symbols of each axis."""
    return parse_level_string(ALTERNATING)


@pytest.fixture
def classic_level() -> Level:
    """Level with eight blocks."""
    return parse_level_string(CLASSIC)


@pytest.fixture
def level_file_text() -> str:
    """Three-level file with comments and blank lines."""
    return "# Open\n" + OPEN_ROW.lstrip() + "\n# Blocked\n" + BLOCKED_ROW.lstrip() + CLASSIC


@pytest.fixture
def open_row_text() -> str:
    """Text of the open row level."""
    return OPEN_ROW.lstrip()


@pytest.fixture
def blocked_row_text() -> str:
    """Text of the blocked row level."""
    return BLOCKED_ROW.lstrip()
