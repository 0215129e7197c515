"""Capture detection and resolution logic."""

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

from pawn_game.schemas.game_engine import GameState, Piece, Position

from .board import get_piece_at
from .events import AnyGameEvent, PieceCaptured


@dataclass
class CaptureResult:
    """Piece collection after a move, plus what (if anything) was captured."""

    pieces: list[Piece]
    captured: Piece | None = None
    events: list[AnyGameEvent] = field(default_factory=list)


def detect_capture(state: GameState, moving_piece: Piece, to: Position) -> Piece | None:
    """Return the opponent piece standing on the destination, if any.

    Only diagonal destinations can be occupied after validation, since a
    forward step requires an empty cell.
    """
    target = get_piece_at(state, to)
    if target is None or target.owner == moving_piece.owner:
        return None
    return target


def resolve_capture(state: GameState, moving_piece: Piece, to: Position) -> CaptureResult:
    """Build the new piece collection for a move to `to`.

    The moving piece takes the destination; a captured piece is kept in the
    collection with alive=False. All other pieces are carried over as-is.

    Args:
        state: Current game state (move already validated).
        moving_piece: The piece being moved.
        to: Destination cell.

    Returns:
        CaptureResult with a fresh pieces list and any PieceCaptured event.
    """
    captured = detect_capture(state, moving_piece, to)
    events: list[AnyGameEvent] = []

    new_pieces: list[Piece] = []
    for piece in state.pieces:
        if piece.piece_id == moving_piece.piece_id:
            new_pieces.append(piece.model_copy(update={"position": to}))
        elif captured is not None and piece.piece_id == captured.piece_id:
            new_pieces.append(piece.model_copy(update={"alive": False}))
        else:
            new_pieces.append(piece)

    if captured is not None:
        logger.info(
            "Piece captured: capturing=%s, captured=%s, position=(%d,%d)",
            moving_piece.piece_id,
            captured.piece_id,
            to.row,
            to.col,
        )
        events.append(
            PieceCaptured(
                capturing_player=moving_piece.owner,
                capturing_piece_id=moving_piece.piece_id,
                captured_player=captured.owner,
                captured_piece_id=captured.piece_id,
                position=to,
            )
        )

    return CaptureResult(pieces=new_pieces, captured=captured, events=events)
