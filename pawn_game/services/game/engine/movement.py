"""Piece movement processing logic."""

import logging

logger = logging.getLogger(__name__)

from pawn_game.schemas.game_engine import GameState, Move, Position

from .board import get_piece_by_id
from .captures import resolve_capture
from .events import AnyGameEvent, PieceMoved, TurnEnded
from .players import get_opponent, get_player_config
from .rounds import handle_round_win
from .validation import ProcessResult


def process_move(state: GameState, to: Position) -> ProcessResult:
    """Move the selected piece and return updated state with events.

    Handles:
    - Moving the piece and marking a captured opponent piece dead
    - Ending the round when the piece lands on its win row (the capture is
      applied first, so it is part of the winning snapshot)
    - Otherwise passing the turn to the opponent

    Args:
        state: Current game state (move already validated).
        to: Destination of the selected piece.

    Returns:
        ProcessResult with new state and events.
    """
    piece = get_piece_by_id(state, state.selected_piece) if state.selected_piece else None
    if piece is None:
        logger.error("process_move called without a resolvable selection")
        return ProcessResult.failure("NO_SELECTION", "No piece is selected")

    player = piece.owner
    logger.info(
        "Processing move: player=%s, piece=%s, from=(%d,%d), to=(%d,%d)",
        player.value,
        piece.piece_id,
        piece.position.row,
        piece.position.col,
        to.row,
        to.col,
    )

    capture = resolve_capture(state, piece, to)
    move = Move(
        piece_id=piece.piece_id,
        player=player,
        from_position=piece.position,
        to_position=to,
        is_capture=capture.captured is not None,
        captured_piece_id=capture.captured.piece_id if capture.captured else None,
    )
    events: list[AnyGameEvent] = [PieceMoved(move=move), *capture.events]

    moved_state = state.model_copy(
        update={
            "pieces": capture.pieces,
            "scores": dict(state.scores),
            "selected_piece": None,
            "valid_moves": [],
        }
    )

    # Win check takes precedence over passing the turn
    if to.row == get_player_config(player, state.board_setup).win_row:
        logger.debug("Piece %s reached win row %d", piece.piece_id, to.row)
        new_state, round_events = handle_round_win(moved_state, player)
        events.extend(round_events)
        return ProcessResult.ok(new_state, events)

    next_player = get_opponent(player)
    events.append(TurnEnded(player=player, next_player=next_player))
    new_state = moved_state.model_copy(update={"current_player": next_player})

    logger.debug(
        "Turn passed: player=%s, next_player=%s",
        player.value,
        next_player.value,
    )
    return ProcessResult.ok(new_state, events)
