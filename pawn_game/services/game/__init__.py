"""Game service module.

Provides:
- Match initialization (start_game.py)
- Game engine processing (engine/)
"""

# Re-export from engine for convenience
from .engine import (
    GameAction,
    MovePieceAction,
    ProcessResult,
    ResetGameAction,
    SelectPieceAction,
    StartNextRoundAction,
    build_action_from_payload,
    get_valid_moves,
    is_valid_move,
    move_piece,
    process_action,
    select_piece,
    start_next_round,
)
from .start_game import (
    choose_starting_player,
    create_board_setup,
    create_initial_state,
    reset_game,
    validate_board_setup,
)

__all__ = [
    # Initialization
    "create_initial_state",
    "reset_game",
    "create_board_setup",
    "validate_board_setup",
    "choose_starting_player",
    # Operations
    "select_piece",
    "move_piece",
    "start_next_round",
    "get_valid_moves",
    "is_valid_move",
    # Engine
    "GameAction",
    "ProcessResult",
    "SelectPieceAction",
    "MovePieceAction",
    "StartNextRoundAction",
    "ResetGameAction",
    "process_action",
    "build_action_from_payload",
]
