"""Puzzle API endpoints."""

import logging
from typing import Annotated, Literal

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from unblock.game.moves import UnknownBlockError
from unblock.session import BoardSnapshot, GameSession, get_game_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/puzzle", tags=["puzzle"])


# Request/response models


class BlockResponse(BaseModel):
    """A block at its current position."""

    id: int
    orientation: Literal["horizontal", "vertical"]
    cells: list[tuple[int, int]]
    is_player: bool = Field(alias="isPlayer")

    model_config = {"populate_by_name": True}


class ExitResponse(BaseModel):
    """The exit gap and the cells the player has to reach."""

    marker: tuple[int, int]
    cells: list[tuple[int, int]]


class BoardResponse(BaseModel):
    """Current board state."""

    level_index: int = Field(alias="levelIndex")
    level_count: int = Field(alias="levelCount")
    blocks: list[BlockResponse]
    exit: ExitResponse
    is_complete: bool = Field(alias="isComplete")
    text: str

    model_config = {"populate_by_name": True}


class MoveRequest(BaseModel):
    """Request to slide a block along its axis."""

    block_id: int = Field(alias="blockId")
    steps: int

    model_config = {"populate_by_name": True}


class MoveResponse(BaseModel):
    """Result of a move request."""

    block_id: int = Field(alias="blockId")
    displacement: int
    completed: bool
    level_index: int = Field(alias="levelIndex")

    model_config = {"populate_by_name": True}


# Helper functions


def _board_response(snapshot: BoardSnapshot) -> BoardResponse:
    return BoardResponse(
        level_index=snapshot.level_index,
        level_count=snapshot.level_count,
        blocks=[
            BlockResponse(
                id=block.id,
                orientation=block.orientation.value,
                cells=list(block.cells),
                is_player=block.is_player,
            )
            for block in snapshot.blocks
        ],
        exit=ExitResponse(marker=snapshot.exit.marker, cells=list(snapshot.exit.cells)),
        is_complete=snapshot.is_complete,
        text=snapshot.text,
    )


SessionDep = Annotated[GameSession, Depends(get_game_session)]


# Endpoints


@router.get("/board", response_model=BoardResponse)
def get_board(session: SessionDep) -> BoardResponse:
    """Get the current level's board."""
    return _board_response(session.snapshot())


@router.post("/moves", response_model=MoveResponse)
def move_block(request: MoveRequest, session: SessionDep) -> MoveResponse:
    """Slide a block up to `steps` cells along its axis.

    The move is clamped to the free space in front of the block; a blocked
    move succeeds with a displacement of 0.
    """
    try:
        outcome = session.attempt_move(request.block_id, request.steps)
    except UnknownBlockError as e:
        logger.warning(f"Move rejected: {e}")
        raise HTTPException(status_code=404, detail="Block not found") from None

    return MoveResponse(
        block_id=outcome.block_id,
        displacement=outcome.displacement,
        completed=outcome.completed,
        level_index=outcome.level_index,
    )


@router.post("/reset", response_model=BoardResponse)
def reset_level(session: SessionDep) -> BoardResponse:
    """Undo every move on the current level."""
    return _board_response(session.reset_current())


@router.post("/next", response_model=BoardResponse)
def next_level(session: SessionDep) -> BoardResponse:
    """Go to the next level."""
    return _board_response(session.advance())


@router.post("/prev", response_model=BoardResponse)
def previous_level(session: SessionDep) -> BoardResponse:
    """Go to the previous level."""
    return _board_response(session.retreat())


@router.post("/levels/{level_index}", response_model=BoardResponse)
def goto_level(level_index: int, session: SessionDep) -> BoardResponse:
    """Jump to a level by index."""
    try:
        snapshot = session.goto(level_index)
    except IndexError:
        raise HTTPException(status_code=404, detail="Level not found") from None
    return _board_response(snapshot)
