"""Main entry point for game action processing.

This module provides the primary interface for processing game actions:
- process_action(): Validates and processes any game action
- Dispatches to specialized handlers based on action type
- Returns ProcessResult with new state and events

select_piece(), move_piece() and start_next_round() wrap process_action()
for callers that only hold a state value: a rejected action returns the
input state unchanged instead of a failure result.
"""

import logging

logger = logging.getLogger(__name__)

from pawn_game.schemas.game_engine import GameState, Position

from .actions import (
    GameAction,
    MovePieceAction,
    ResetGameAction,
    SelectPieceAction,
    StartNextRoundAction,
)
from .movement import process_move
from .rounds import process_next_round, process_reset
from .selection import process_select
from .validation import ProcessResult, validate_action


def process_action(state: GameState, action: GameAction) -> ProcessResult:
    """Process a game action and return the result.

    This is the main entry point for all game actions. It:
    1. Validates the action is legal given current state
    2. Dispatches to the appropriate handler
    3. Assigns sequence numbers to events
    4. Returns ProcessResult with new state and events

    The input state is never modified.

    Args:
        state: Current game state.
        action: The action to process.

    Returns:
        ProcessResult containing:
        - success: Whether the action was processed successfully
        - state: The new game state (if successful)
        - events: List of events that occurred (with seq numbers)
        - error_code/error_message: Error details (if failed)

    Example:
        >>> result = process_action(state, SelectPieceAction(piece_id="p1-2"))
        >>> if result.success:
        ...     state = result.state
        ... else:
        ...     show_error(result.error_code, result.error_message)
    """
    action_type = type(action).__name__
    logger.info(
        "Processing action: type=%s, player=%s, phase=%s",
        action_type,
        state.current_player.value,
        state.phase.value,
    )
    logger.debug("Action details: %s", action)

    validation = validate_action(state, action)
    if not validation.is_valid:
        logger.warning(
            "Action validation failed: code=%s, message=%s, action=%s",
            validation.error_code,
            validation.error_message,
            action_type,
        )
        return ProcessResult.failure(
            validation.error_code or "VALIDATION_ERROR",
            validation.error_message or "Invalid action",
        )

    logger.debug("Dispatching to handler for action type: %s", action_type)

    if isinstance(action, SelectPieceAction):
        result = process_select(state, action.piece_id)

    elif isinstance(action, MovePieceAction):
        result = process_move(state, action.to)

    elif isinstance(action, StartNextRoundAction):
        result = process_next_round(state)

    elif isinstance(action, ResetGameAction):
        result = process_reset(action.starting_player, state.board_setup)

    else:
        logger.error("Unknown action type received: %s", action_type)
        return ProcessResult.failure(
            "UNKNOWN_ACTION",
            f"Unknown action type: {type(action).__name__}",
        )

    if result.success and result.state is not None:
        result = _assign_event_sequences(result)
        logger.info(
            "Action processed successfully: type=%s, phase=%s, events_generated=%d",
            action_type,
            result.state.phase.value,
            len(result.events),
        )
        logger.debug("Generated events: %s", [type(e).__name__ for e in result.events])
    else:
        logger.warning(
            "Action processing failed: type=%s, error=%s",
            action_type,
            result.error_code,
        )

    return result


def _assign_event_sequences(result: ProcessResult) -> ProcessResult:
    """Assign monotonically increasing sequence numbers to events.

    Updates each event's seq field and increments the state's event_seq counter.
    """
    if result.state is None or not result.events:
        return result

    current_seq = result.state.event_seq
    for event in result.events:
        event.seq = current_seq
        current_seq += 1

    new_state = result.state.model_copy(update={"event_seq": current_seq})

    return ProcessResult.ok(new_state, result.events)


def _state_or_unchanged(state: GameState, result: ProcessResult) -> GameState:
    if result.success and result.state is not None:
        return result.state
    return state


def select_piece(state: GameState, piece_id: str) -> GameState:
    """Select one of the current player's alive pieces.

    Unknown, captured or opponent pieces leave the state unchanged.
    """
    return _state_or_unchanged(state, process_action(state, SelectPieceAction(piece_id=piece_id)))


def move_piece(state: GameState, to: Position) -> GameState:
    """Move the selected piece to `to` if it is one of its valid moves."""
    return _state_or_unchanged(state, process_action(state, MovePieceAction(to=to)))


def start_next_round(state: GameState) -> GameState:
    """Reset the board for the next round; a no-op unless the round has ended."""
    return _state_or_unchanged(state, process_action(state, StartNextRoundAction()))
