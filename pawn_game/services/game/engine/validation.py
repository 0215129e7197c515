"""Validation layer for game actions and ProcessResult pattern.

Separates validation from processing logic:
- validate_action() checks if an action is valid given current state
- ProcessResult replaces exceptions for control flow
"""

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

from pawn_game.schemas.game_engine import GamePhase, GameState

from .actions import (
    GameAction,
    MovePieceAction,
    ResetGameAction,
    SelectPieceAction,
    StartNextRoundAction,
)
from .board import get_piece_by_id
from .events import AnyGameEvent
from .legal_moves import is_valid_move


@dataclass
class ProcessResult:
    """Result of processing a game action.

    Replaces exceptions for control flow, providing explicit success/failure
    with error codes the caller can map to messages.
    """

    state: GameState | None = None
    events: list[AnyGameEvent] = field(default_factory=list)
    success: bool = True
    error_code: str | None = None
    error_message: str | None = None

    @classmethod
    def ok(
        cls,
        state: GameState,
        events: list[AnyGameEvent] | None = None,
    ) -> "ProcessResult":
        """Create a successful result with new state and events."""
        return cls(
            state=state,
            events=events or [],
            success=True,
        )

    @classmethod
    def failure(cls, code: str, message: str) -> "ProcessResult":
        """Create a failure result with error details."""
        return cls(
            state=None,
            events=[],
            success=False,
            error_code=code,
            error_message=message,
        )


@dataclass
class ValidationResult:
    """Result of validating an action before processing."""

    is_valid: bool = True
    error_code: str | None = None
    error_message: str | None = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        """Create a successful validation result."""
        return cls(is_valid=True)

    @classmethod
    def error(cls, code: str, message: str) -> "ValidationResult":
        """Create a validation failure with error details."""
        return cls(
            is_valid=False,
            error_code=code,
            error_message=message,
        )


def validate_action(state: GameState, action: GameAction) -> ValidationResult:
    """Validate an action before processing.

    Checks:
    - Game phase allows this action
    - A selected piece exists, is alive and belongs to the current player
    - A move has an active selection and targets one of its valid moves

    Args:
        state: Current game state.
        action: The action to validate.

    Returns:
        ValidationResult indicating success or failure with error details.
    """
    action_type = type(action).__name__
    logger.debug(
        "Validating action: type=%s, player=%s, phase=%s",
        action_type,
        state.current_player.value,
        state.phase.value,
    )

    # A reset is allowed from any phase
    if isinstance(action, ResetGameAction):
        return ValidationResult.ok()

    if isinstance(action, StartNextRoundAction):
        if state.phase != GamePhase.ROUND_END:
            logger.warning(
                "Validation failed: WRONG_PHASE (next round), current_phase=%s",
                state.phase.value,
            )
            return ValidationResult.error(
                "WRONG_PHASE",
                "The current round has not ended",
            )
        return ValidationResult.ok()

    # Selecting and moving require a round in play
    if state.phase != GamePhase.PLAYING:
        logger.warning(
            "Validation failed: WRONG_PHASE, action=%s, current_phase=%s",
            action_type,
            state.phase.value,
        )
        return ValidationResult.error(
            "WRONG_PHASE",
            "No round is in play",
        )

    if isinstance(action, SelectPieceAction):
        piece = get_piece_by_id(state, action.piece_id)
        if piece is None:
            logger.warning("Validation failed: PIECE_NOT_FOUND, piece=%s", action.piece_id)
            return ValidationResult.error(
                "PIECE_NOT_FOUND",
                f"'{action.piece_id}' is not a piece",
            )
        if not piece.alive:
            logger.warning("Validation failed: PIECE_CAPTURED, piece=%s", action.piece_id)
            return ValidationResult.error(
                "PIECE_CAPTURED",
                f"'{action.piece_id}' has been captured",
            )
        if piece.owner != state.current_player:
            logger.warning(
                "Validation failed: NOT_YOUR_TURN, current=%s, owner=%s",
                state.current_player.value,
                piece.owner.value,
            )
            return ValidationResult.error(
                "NOT_YOUR_TURN",
                "It's not your turn",
            )

    elif isinstance(action, MovePieceAction):
        if state.selected_piece is None:
            logger.warning("Validation failed: NO_SELECTION")
            return ValidationResult.error(
                "NO_SELECTION",
                "Select a piece before moving",
            )

        piece = get_piece_by_id(state, state.selected_piece)
        if piece is None:
            logger.warning(
                "Validation failed: PIECE_NOT_FOUND, selected=%s",
                state.selected_piece,
            )
            return ValidationResult.error(
                "PIECE_NOT_FOUND",
                f"'{state.selected_piece}' is not a piece",
            )

        # Re-check against the rules as well as the stored selection
        to = action.to
        if to not in state.valid_moves or not is_valid_move(state, piece, to):
            logger.warning(
                "Validation failed: ILLEGAL_DESTINATION, requested=(%d,%d), valid_moves=%s",
                to.row,
                to.col,
                [(m.row, m.col) for m in state.valid_moves],
            )
            return ValidationResult.error(
                "ILLEGAL_DESTINATION",
                f"({to.row}, {to.col}) is not a legal destination for '{piece.piece_id}'",
            )

    logger.debug("Action validated successfully: type=%s", action_type)
    return ValidationResult.ok()
