"""Game event types - emitted during state transitions.

Events describe what happened during a game action, so the presentation
layer can animate captures and announce winners without diffing states.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from pawn_game.schemas.game_engine import Move, PlayerId, Position


class GameEvent(BaseModel):
    """Base class for all game events."""

    event_type: str
    seq: int = 0  # Sequence number assigned during processing


class MatchStarted(GameEvent):
    """A fresh match was set up."""

    event_type: Literal["match_started"] = "match_started"
    starting_player: PlayerId


class RoundStarted(GameEvent):
    """The board was reset for a new round."""

    event_type: Literal["round_started"] = "round_started"
    round: int
    starting_player: PlayerId


class PieceSelected(GameEvent):
    """A player selected one of their pieces."""

    event_type: Literal["piece_selected"] = "piece_selected"
    player: PlayerId
    piece_id: str
    valid_moves: list[Position] = Field(
        ..., description="Destinations to highlight"
    )


class PieceMoved(GameEvent):
    """A piece was moved on the board."""

    event_type: Literal["piece_moved"] = "piece_moved"
    move: Move


class PieceCaptured(GameEvent):
    """A piece was captured by a diagonal move."""

    event_type: Literal["piece_captured"] = "piece_captured"
    capturing_player: PlayerId
    capturing_piece_id: str
    captured_player: PlayerId
    captured_piece_id: str
    position: Position = Field(..., description="Cell where the capture occurred")


class TurnEnded(GameEvent):
    """A player's turn has ended without winning the round."""

    event_type: Literal["turn_ended"] = "turn_ended"
    player: PlayerId
    next_player: PlayerId


class RoundWon(GameEvent):
    """A piece reached its win row."""

    event_type: Literal["round_won"] = "round_won"
    winner: PlayerId
    round: int
    scores: dict[PlayerId, int]


class MatchWon(GameEvent):
    """A player reached the round-win threshold."""

    event_type: Literal["match_won"] = "match_won"
    winner: PlayerId
    scores: dict[PlayerId, int]
    rounds_played: int


# Union of all event types for type checking
AnyGameEvent = Annotated[
    MatchStarted
    | RoundStarted
    | PieceSelected
    | PieceMoved
    | PieceCaptured
    | TurnEnded
    | RoundWon
    | MatchWon,
    Field(discriminator="event_type"),
]
