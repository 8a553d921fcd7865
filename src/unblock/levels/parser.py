"""Level file parser.

Level file format:
    - Lines end in "\\n" or "\\r\\n"; trailing whitespace is ignored
    - Lines starting with "#" are comments and are discarded
    - Each level is 8 lines of 8 characters: the 6x6 playable interior
      framed by a one-cell wall ring
    - "&" wall, "^" exit (in the wall ring), "*" empty floor,
      "=" player, "|" / "(" vertical blocks, "-" / "_" horizontal blocks
    - Runs of the same symbol along a block's axis form one block; the
      second symbol of each axis lets two blocks sit end to end
    - Blank lines are skipped everywhere, including inside a level block
    - Fewer than 64 non-whitespace characters left at the end of the file
      (comments excluded) is tolerated and ignored

Example:
    # Level 1
    &&&&&&&&
    &---**|&
    &**|**|&
    &==|**|^
    &|*|*--&
    &|***|*&
    &---*|*&
    &&&&&&&&
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from unblock.game.blocks import GRID_SIZE, Block, Exit, Orientation
from unblock.game.level import Level

logger = logging.getLogger(__name__)

# Interior plus the wall ring on each side
LEVEL_SIZE = GRID_SIZE + 2

COMMENT = "#"


class Tile(Enum):
    """Meaning of one character of a level block."""

    WALL = "&"
    EXIT = "^"
    EMPTY = "*"
    PLAYER = "="
    VERTICAL_A = "|"
    VERTICAL_B = "("
    HORIZONTAL_A = "-"
    HORIZONTAL_B = "_"


TILE_MAP = {tile.value: tile for tile in Tile}

SEGMENT_ORIENTATION = {
    Tile.VERTICAL_A: Orientation.VERTICAL,
    Tile.VERTICAL_B: Orientation.VERTICAL,
    Tile.HORIZONTAL_A: Orientation.HORIZONTAL,
    Tile.HORIZONTAL_B: Orientation.HORIZONTAL,
}

VALID_LENGTHS = (2, 3)
PLAYER_LENGTH = 2


class ParseError(ValueError):
    """A level could not be parsed.

    Attributes:
        reason: What was wrong
        level_index: 0-based index of the level being parsed
        line: 1-based line number in the source, if known
        offset: 0-based byte offset in the source, if known
        source: Name of the source being parsed
    """

    def __init__(
        self,
        reason: str,
        *,
        level_index: int,
        line: int | None = None,
        offset: int | None = None,
        source: str = "<levels>",
    ) -> None:
        self.reason = reason
        self.level_index = level_index
        self.line = line
        self.offset = offset
        self.source = source
        location = f"level {level_index}"
        if line is not None:
            location += f", line {line}"
        if offset is not None:
            location += f", byte {offset}"
        super().__init__(f"{source}: {location}: {reason}")


class InvalidBlockLengthError(ParseError):
    """A run of block cells is not 2 or 3 long (or the player is not 2 long)."""


class MissingPlayerError(ParseError):
    """A level has no player block."""


class MultiplePlayersError(ParseError):
    """A level has more than one player block."""


class InvalidExitError(ParseError):
    """The exit is missing, duplicated, misplaced, or off the player's axis."""


class MissingWallError(ParseError):
    """The wall ring has a gap other than the exit."""


class InvalidCharacterError(ParseError):
    """A level block contains a character outside the level charset."""


class IncompleteLevelLineError(ParseError):
    """A level block has a short, long, or comment line."""


@dataclass(frozen=True)
class SourceLine:
    """One line of a level file.

    Attributes:
        text: Line content without the terminator or trailing whitespace
        number: 1-based line number
        offset: Byte offset of the first character
    """

    text: str
    number: int
    offset: int

    @property
    def is_blank(self) -> bool:
        return not self.text

    @property
    def is_comment(self) -> bool:
        return self.text.startswith(COMMENT)


def split_lines(data: bytes | str) -> list[SourceLine]:
    """Split raw level data into lines, tracking line numbers and byte offsets."""
    if isinstance(data, str):
        data = data.encode("utf-8")

    lines: list[SourceLine] = []
    offset = 0
    for number, raw in enumerate(data.split(b"\n"), start=1):
        # latin-1 maps each byte to one character, keeping offsets exact
        text = raw.decode("latin-1").rstrip("\r").rstrip(" \t")
        lines.append(SourceLine(text=text, number=number, offset=offset))
        offset += len(raw) + 1
    return lines


def _remaining_size(lines: Sequence[SourceLine]) -> int:
    """Count the non-whitespace characters left outside comments."""
    return sum(len("".join(line.text.split())) for line in lines if not line.is_comment)


def parse_levels(data: bytes | str, source: str = "<levels>") -> list[Level]:
    """Parse every level in a level file.

    Args:
        data: Raw file contents
        source: Name used in levels and error messages

    Returns:
        Levels in file order (possibly empty)

    Raises:
        ParseError: If any level block is malformed; the whole load fails
    """
    lines = [line for line in split_lines(data) if not line.is_blank]
    levels: list[Level] = []
    pos = 0

    while True:
        while pos < len(lines) and lines[pos].is_comment:
            pos += 1

        remaining = _remaining_size(lines[pos:])
        if remaining < LEVEL_SIZE * LEVEL_SIZE:
            if pos < len(lines):
                logger.debug(
                    f"Ignoring {remaining} trailing character(s) in {source} "
                    f"starting at line {lines[pos].number}"
                )
            break

        block = lines[pos : pos + LEVEL_SIZE]
        levels.append(parse_level_lines(block, index=len(levels), source=source))
        pos += LEVEL_SIZE

    logger.info(f"Parsed {len(levels)} level(s) from {source}")
    return levels


def parse_level_string(level_str: str, index: int = 0, source: str = "<levels>") -> Level:
    """Parse a single level block.

    Blank lines and surrounding indentation are ignored, so levels can be
    written inline as triple-quoted strings.

    Raises:
        ParseError: If the level is malformed
    """
    lines = [
        SourceLine(text=line.strip(), number=number, offset=0)
        for number, line in enumerate(level_str.splitlines(), start=1)
        if line.strip()
    ]
    if len(lines) != LEVEL_SIZE:
        raise IncompleteLevelLineError(
            f"Expected {LEVEL_SIZE} lines, got {len(lines)}",
            level_index=index,
            source=source,
        )
    return parse_level_lines(lines, index=index, source=source)


def parse_level_lines(lines: Sequence[SourceLine], index: int, source: str) -> Level:
    """Parse one level from exactly LEVEL_SIZE source lines.

    Raises:
        ParseError: If the level is malformed
    """

    def error(cls: type[ParseError], reason: str, row: int, col: int | None = None) -> ParseError:
        line = lines[row]
        offset = line.offset + col if col is not None else line.offset
        return cls(reason, level_index=index, line=line.number, offset=offset, source=source)

    for row, line in enumerate(lines):
        if line.is_comment:
            raise error(IncompleteLevelLineError, "Comment inside level block", row)
        if len(line.text) != LEVEL_SIZE:
            raise error(
                IncompleteLevelLineError,
                f"Expected {LEVEL_SIZE} characters, got {len(line.text)}",
                row,
            )

    tiles: list[list[Tile]] = []
    for row, line in enumerate(lines):
        tile_row = []
        for col, char in enumerate(line.text):
            tile = TILE_MAP.get(char)
            if tile is None:
                raise error(InvalidCharacterError, f"Unexpected character {char!r}", row, col)
            if not _on_ring(row, col) and tile == Tile.EXIT:
                raise error(InvalidExitError, "Exit must be in the wall ring", row, col)
            if not _on_ring(row, col) and tile == Tile.WALL:
                raise error(InvalidCharacterError, "Wall inside the level", row, col)
            tile_row.append(tile)
        tiles.append(tile_row)

    # Exit and walls
    markers = [cell for cell in _ring_cells() if tiles[cell[0]][cell[1]] == Tile.EXIT]
    if not markers:
        raise error(InvalidExitError, "Level has no exit", 0)
    if len(markers) > 1:
        row, col = markers[1]
        raise error(InvalidExitError, f"Level has {len(markers)} exits", row, col)
    marker_row, marker_col = markers[0]
    try:
        level_exit = Exit.from_marker(marker_row - 1, marker_col - 1)
    except ValueError as e:
        raise error(InvalidExitError, str(e), marker_row, marker_col) from None

    for row, col in _ring_cells():
        if (row, col) != markers[0] and tiles[row][col] != Tile.WALL:
            raise error(
                MissingWallError, f"Expected wall, found {tiles[row][col].value!r}", row, col
            )

    # Blocks
    interior = [tile_row[1:-1] for tile_row in tiles[1:-1]]
    blocks: list[Block] = []
    for block_id, (row, col, tile, orientation, length) in enumerate(
        _scan_runs(interior), start=1
    ):
        is_player = tile == Tile.PLAYER
        if length not in VALID_LENGTHS or (is_player and length != PLAYER_LENGTH):
            raise error(
                InvalidBlockLengthError,
                f"Block of {tile.value!r} has length {length}",
                row + 1,
                col + 1,
            )
        blocks.append(Block.create(block_id, orientation, row, col, length, is_player=is_player))

    players = [block for block in blocks if block.is_player]
    if not players:
        raise error(MissingPlayerError, "Level has no player block", 0)
    if len(players) > 1:
        row, col = players[1].head
        raise error(
            MultiplePlayersError, f"Level has {len(players)} player blocks", row + 1, col + 1
        )
    if not level_exit.is_reachable_by(players[0]):
        raise error(
            InvalidExitError,
            f"Exit at {level_exit.marker} is not in line with the player block",
            marker_row,
            marker_col,
        )

    return Level(blocks=tuple(blocks), exit=level_exit, index=index, source=source)


def _on_ring(row: int, col: int) -> bool:
    return row in (0, LEVEL_SIZE - 1) or col in (0, LEVEL_SIZE - 1)


def _ring_cells() -> list[tuple[int, int]]:
    return [
        (row, col)
        for row in range(LEVEL_SIZE)
        for col in range(LEVEL_SIZE)
        if _on_ring(row, col)
    ]


def _scan_runs(
    interior: list[list[Tile]],
) -> Iterable[tuple[int, int, Tile, Orientation, int]]:
    """Group interior cells into runs in a single top-to-bottom, left-to-right scan.

    Yields (row, col, tile, orientation, length) for each run, where (row, col)
    is the run's top/left cell. A run continues over identical symbols along
    its axis and ends at the first different symbol.
    """
    assigned = [[False] * GRID_SIZE for _ in range(GRID_SIZE)]

    def extends(row: int, col: int, tile: Tile) -> bool:
        return (
            row < GRID_SIZE
            and col < GRID_SIZE
            and not assigned[row][col]
            and interior[row][col] == tile
        )

    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            tile = interior[row][col]
            if tile == Tile.EMPTY or assigned[row][col]:
                continue

            if tile == Tile.PLAYER:
                if extends(row, col + 1, tile):
                    orientation = Orientation.HORIZONTAL
                else:
                    orientation = Orientation.VERTICAL
            else:
                orientation = SEGMENT_ORIENTATION[tile]

            d_row, d_col = orientation.delta
            length = 0
            while extends(row + d_row * length, col + d_col * length, tile):
                assigned[row + d_row * length][col + d_col * length] = True
                length += 1

            yield row, col, tile, orientation, length


def format_board(blocks: Iterable[Block], level_exit: Exit) -> str:
    """Render blocks and an exit as an 8x8 level block.

    Blocks that touch end to end on the same axis get alternating symbols,
    so the output parses back into the same blocks.
    """
    grid = [["&"] * LEVEL_SIZE for _ in range(LEVEL_SIZE)]
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            grid[row + 1][col + 1] = Tile.EMPTY.value
    marker_row, marker_col = level_exit.marker
    grid[marker_row + 1][marker_col + 1] = Tile.EXIT.value

    for block in sorted(blocks, key=lambda b: b.head):
        row, col = block.head
        if block.is_player:
            symbol = Tile.PLAYER.value
        elif block.orientation == Orientation.HORIZONTAL:
            before = grid[row + 1][col]
            symbol = (
                Tile.HORIZONTAL_B.value
                if before == Tile.HORIZONTAL_A.value
                else Tile.HORIZONTAL_A.value
            )
        else:
            before = grid[row][col + 1]
            symbol = (
                Tile.VERTICAL_B.value if before == Tile.VERTICAL_A.value else Tile.VERTICAL_A.value
            )
        for cell_row, cell_col in block.cells:
            grid[cell_row + 1][cell_col + 1] = symbol

    return "\n".join("".join(line) for line in grid) + "\n"


def format_level(level: Level) -> str:
    """Render a level back to its text form."""
    return format_board(level.blocks, level.exit)
