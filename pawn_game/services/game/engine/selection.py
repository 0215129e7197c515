"""Piece selection processing logic."""

import logging

logger = logging.getLogger(__name__)

from pawn_game.schemas.game_engine import GameState

from .board import get_piece_by_id
from .events import AnyGameEvent, PieceSelected
from .legal_moves import get_valid_moves
from .validation import ProcessResult


def process_select(state: GameState, piece_id: str) -> ProcessResult:
    """Select a piece and compute its valid moves.

    Replaces any previous selection. Turn, phase and piece positions are
    left unchanged; selecting a piece with no legal destinations is allowed
    and yields an empty valid_moves list.

    Args:
        state: Current game state (already validated).
        piece_id: The piece to select.

    Returns:
        ProcessResult with the new selection and a PieceSelected event.
    """
    piece = get_piece_by_id(state, piece_id)
    if piece is None:
        logger.error("process_select called with unknown piece: %s", piece_id)
        return ProcessResult.failure("PIECE_NOT_FOUND", f"'{piece_id}' is not a piece")

    valid_moves = get_valid_moves(state, piece)
    logger.info(
        "Piece selected: player=%s, piece=%s, valid_moves=%d",
        piece.owner.value,
        piece_id,
        len(valid_moves),
    )

    events: list[AnyGameEvent] = [
        PieceSelected(
            player=piece.owner,
            piece_id=piece_id,
            valid_moves=list(valid_moves),
        )
    ]

    new_state = state.model_copy(
        update={
            "pieces": list(state.pieces),
            "scores": dict(state.scores),
            "selected_piece": piece_id,
            "valid_moves": valid_moves,
        }
    )
    return ProcessResult.ok(new_state, events)
