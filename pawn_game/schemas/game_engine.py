from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from pawn_game.constants import (
    GRID_COLS,
    GRID_ROWS,
    PIECES_PER_PLAYER,
    ROUNDS_TO_WIN,
    TOTAL_ROUNDS,
)


# Player identifiers (also used as the piece id prefix)
class PlayerId(str, Enum):
    ONE = "p1"
    TWO = "p2"


# Game phases
# The "setup" phase (choosing who starts) belongs to the caller, not the engine.
class GamePhase(str, Enum):
    PLAYING = "playing"
    ROUND_END = "round_end"
    MATCH_END = "match_end"


class Position(BaseModel):
    """A board cell. Any integer pair is representable; see is_valid_position."""

    model_config = ConfigDict(frozen=True)

    row: int
    col: int


class Piece(BaseModel):
    model_config = ConfigDict(frozen=True)

    piece_id: str
    owner: PlayerId
    position: Position
    alive: bool = True


# Static per-player rules
class PlayerConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    player: PlayerId
    symbol: str
    direction: Literal[1, -1] = Field(..., description="Row delta of a forward step")
    start_row: int
    win_row: int


# Defined at match start, carried by the state so engine functions stay pure
class BoardSetup(BaseModel):
    model_config = ConfigDict(frozen=True)

    rows: int = GRID_ROWS
    cols: int = GRID_COLS
    pieces_per_player: int = PIECES_PER_PLAYER
    rounds_to_win: int = ROUNDS_TO_WIN
    total_rounds: int = TOTAL_ROUNDS


class Move(BaseModel):
    """A candidate or applied move of a single piece."""

    model_config = ConfigDict(frozen=True)

    piece_id: str
    player: PlayerId
    from_position: Position
    to_position: Position
    is_capture: bool = False
    captured_piece_id: str | None = None


def empty_scores() -> dict[PlayerId, int]:
    return {PlayerId.ONE: 0, PlayerId.TWO: 0}


class GameState(BaseModel):
    """Complete match state - the single value passed in and out of the engine.

    Transitions never modify an existing state; they build a new one with
    fresh collections via model_copy(update=...).
    """

    model_config = ConfigDict(frozen=True)

    pieces: list[Piece]
    current_player: PlayerId
    round: int = 1
    scores: dict[PlayerId, int] = Field(default_factory=empty_scores)
    phase: GamePhase = GamePhase.PLAYING
    selected_piece: str | None = None
    valid_moves: list[Position] = []
    starting_player: PlayerId
    round_winner: PlayerId | None = None
    match_winner: PlayerId | None = None
    board_setup: BoardSetup = Field(default_factory=BoardSetup)
    event_seq: int = 0  # Next sequence number for events (monotonically increasing)
