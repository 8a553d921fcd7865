"""Game session: the API hosts use to drive the puzzle.

A host (renderer, input loop, HTTP API) loads a level file once, then calls
the query and command methods here once per user interaction.
"""

import logging
import threading
from dataclasses import dataclass
from pathlib import Path

from unblock.game.blocks import Block, Cell, Exit
from unblock.game.moves import attempt_move
from unblock.game.win import is_complete
from unblock.levels.loader import load_level_file
from unblock.levels.parser import format_board, parse_levels
from unblock.levels.sequencer import LevelSequencer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveOutcome:
    """Result of a move request.

    Attributes:
        block_id: Block that was asked to move
        displacement: Signed number of cells actually moved (0 if blocked)
        completed: True if this move put the player on the exit
        level_index: Level being played after the move (changes on auto-advance)
    """

    block_id: int
    displacement: int
    completed: bool
    level_index: int


@dataclass(frozen=True)
class BoardSnapshot:
    """Consistent view of the current level, taken under the session lock.

    Attributes:
        level_index: Level being played
        level_count: Number of levels in the set
        blocks: Blocks at their current positions, in id order
        exit: Exit of the current level
        is_complete: True if the player is on the exit
        text: Board in level-file text form
    """

    level_index: int
    level_count: int
    blocks: tuple[Block, ...]
    exit: Exit
    is_complete: bool
    text: str


class GameSession:
    """One player's run through a level set.

    Queries and commands are serialized with a lock, so a session can be
    shared by handlers running on different threads. Reads that need to
    agree with each other should go through `snapshot()`.
    """

    def __init__(self, sequencer: LevelSequencer, auto_advance: bool = True) -> None:
        self.sequencer = sequencer
        self.auto_advance = auto_advance
        self._lock = threading.Lock()

    @classmethod
    def load(
        cls,
        data: bytes | str,
        source: str = "<levels>",
        wrap: bool = False,
        auto_advance: bool = True,
    ) -> "GameSession":
        """Create a session from raw level file contents.

        Raises:
            ParseError: If a level is malformed
            ValueError: If the data holds no levels
        """
        levels = parse_levels(data, source=source)
        return cls(LevelSequencer(levels, wrap=wrap), auto_advance=auto_advance)

    @classmethod
    def from_file(
        cls,
        path: Path | str | None = None,
        wrap: bool = False,
        auto_advance: bool = True,
    ) -> "GameSession":
        """Create a session from a level file, a directory holding levels.dat, or the bundled levels."""
        levels = load_level_file(path)
        return cls(LevelSequencer(levels, wrap=wrap), auto_advance=auto_advance)

    # Queries

    @property
    def level_index(self) -> int:
        with self._lock:
            return self.sequencer.current_index

    @property
    def level_count(self) -> int:
        return len(self.sequencer)

    def blocks(self) -> list[Block]:
        """Current blocks in id order."""
        with self._lock:
            return self._sorted_blocks()

    def exit_cells(self) -> tuple[Cell, Cell]:
        with self._lock:
            return self.sequencer.board.exit.cells

    def exit_marker(self) -> Cell:
        with self._lock:
            return self.sequencer.board.exit.marker

    def is_complete(self) -> bool:
        with self._lock:
            return is_complete(self.sequencer.board)

    def render(self) -> str:
        with self._lock:
            return self._render()

    def snapshot(self) -> BoardSnapshot:
        """Read the whole current board at once."""
        with self._lock:
            return self._snapshot()

    def _sorted_blocks(self) -> list[Block]:
        return [block for _, block in sorted(self.sequencer.board.blocks.items())]

    def _render(self) -> str:
        board = self.sequencer.board
        return format_board(list(board.blocks.values()), board.exit)

    def _snapshot(self) -> BoardSnapshot:
        # Caller holds the lock
        board = self.sequencer.board
        return BoardSnapshot(
            level_index=self.sequencer.current_index,
            level_count=len(self.sequencer),
            blocks=tuple(self._sorted_blocks()),
            exit=board.exit,
            is_complete=is_complete(board),
            text=self._render(),
        )

    # Commands

    def attempt_move(self, block_id: int, steps: int) -> MoveOutcome:
        """Slide a block up to `steps` cells along its axis.

        Raises:
            UnknownBlockError: If the block is not on the current board
        """
        with self._lock:
            board = self.sequencer.board
            was_complete = is_complete(board)
            _, displacement = attempt_move(board, block_id, steps)
            completed = displacement != 0 and not was_complete and is_complete(board)

            if completed:
                logger.info(f"Level {self.sequencer.current_index} completed")
                if self.auto_advance and (self.sequencer.wrap or not self.sequencer.is_last):
                    self.sequencer.advance()

            return MoveOutcome(
                block_id=block_id,
                displacement=displacement,
                completed=completed,
                level_index=self.sequencer.current_index,
            )

    def reset_current(self) -> BoardSnapshot:
        with self._lock:
            logger.info(f"Resetting level {self.sequencer.current_index}")
            self.sequencer.reset_current()
            return self._snapshot()

    def advance(self) -> BoardSnapshot:
        with self._lock:
            self.sequencer.advance()
            return self._snapshot()

    def retreat(self) -> BoardSnapshot:
        with self._lock:
            self.sequencer.retreat()
            return self._snapshot()

    def goto(self, index: int) -> BoardSnapshot:
        """Jump to a level.

        Raises:
            IndexError: If the index is out of range
        """
        with self._lock:
            self.sequencer.goto(index)
            return self._snapshot()


# Global session instance
_game_session: GameSession | None = None


def get_game_session() -> GameSession:
    """Get the global game session, loading levels from settings on first use."""
    global _game_session
    if _game_session is None:
        from unblock.settings import get_settings

        settings = get_settings()
        _game_session = GameSession.from_file(
            settings.levels_path,
            wrap=settings.wrap_levels,
            auto_advance=settings.auto_advance,
        )
    return _game_session


def set_game_session(session: GameSession | None) -> None:
    """Replace the global game session (None reloads from settings on next use)."""
    global _game_session
    _game_session = session
