"""Game engine module - pure functional game logic.

This module provides the core game engine with:
- Board geometry and per-player rules
- Legal move calculation (forward steps, diagonal captures)
- Action types for explicit caller intents
- Event types describing each transition
- ProcessResult pattern for error handling

Usage:
    from pawn_game.services.game.engine import (
        process_action,
        SelectPieceAction,
        MovePieceAction,
    )

    result = process_action(state, SelectPieceAction(piece_id="p1-2"))

    if result.success:
        state = result.state
        events = result.events  # Animate/announce these
    else:
        print(f"Error: {result.error_code} - {result.error_message}")

Callers that only want the new state can use select_piece(), move_piece()
and start_next_round(), which return the input state on rejection.
"""

# Actions - explicit caller intents
from .actions import (
    GameAction,
    MovePieceAction,
    ResetGameAction,
    SelectPieceAction,
    StartNextRoundAction,
    build_action_from_payload,
)

# Board geometry and player rules
from .board import create_initial_pieces, get_piece_at, get_piece_by_id, is_valid_position
from .players import PLAYERS, get_opponent, get_player_config

# Events
from .events import (
    AnyGameEvent,
    GameEvent,
    MatchStarted,
    MatchWon,
    PieceCaptured,
    PieceMoved,
    PieceSelected,
    RoundStarted,
    RoundWon,
    TurnEnded,
)

# Legal moves
from .legal_moves import get_legal_moves, get_valid_moves, has_any_legal_moves, is_valid_move

# Main processing
from .process import move_piece, process_action, select_piece, start_next_round
from .rounds import get_winner, is_match_over

# Result types
from .validation import ProcessResult, ValidationResult, validate_action

__all__ = [
    # Actions
    "GameAction",
    "SelectPieceAction",
    "MovePieceAction",
    "StartNextRoundAction",
    "ResetGameAction",
    "build_action_from_payload",
    # Board / players
    "is_valid_position",
    "get_piece_at",
    "get_piece_by_id",
    "create_initial_pieces",
    "PLAYERS",
    "get_player_config",
    "get_opponent",
    # Events
    "GameEvent",
    "AnyGameEvent",
    "MatchStarted",
    "RoundStarted",
    "PieceSelected",
    "PieceMoved",
    "PieceCaptured",
    "TurnEnded",
    "RoundWon",
    "MatchWon",
    # Processing
    "process_action",
    "select_piece",
    "move_piece",
    "start_next_round",
    "is_match_over",
    "get_winner",
    # Validation
    "ProcessResult",
    "ValidationResult",
    "validate_action",
    # Legal moves
    "get_valid_moves",
    "is_valid_move",
    "get_legal_moves",
    "has_any_legal_moves",
]
