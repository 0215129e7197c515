"""Game action types - explicit caller intents separated from game state."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from pawn_game.schemas.game_engine import PlayerId, Position


class SelectPieceAction(BaseModel):
    """Current player picks one of their pieces."""

    action_type: Literal["select_piece"] = "select_piece"
    piece_id: str = Field(..., description="ID of the piece to select, e.g. 'p1-2'")


class MovePieceAction(BaseModel):
    """Current player moves the selected piece."""

    action_type: Literal["move_piece"] = "move_piece"
    to: Position = Field(..., description="Destination cell")


class StartNextRoundAction(BaseModel):
    """Continue the match after a round has ended."""

    action_type: Literal["start_next_round"] = "start_next_round"


class ResetGameAction(BaseModel):
    """Discard the match and start a new one."""

    action_type: Literal["reset_game"] = "reset_game"
    starting_player: PlayerId


# Union type for all game actions
GameAction = Annotated[
    SelectPieceAction | MovePieceAction | StartNextRoundAction | ResetGameAction,
    Field(discriminator="action_type"),
]


def build_action_from_payload(payload: dict) -> GameAction:
    """Build a typed action from a raw payload dict.

    Args:
        payload: Dict with 'action_type' key and action-specific fields.

    Returns:
        The appropriate GameAction subtype.

    Raises:
        ValueError: If action_type is missing or unknown.
    """
    action_type = payload.get("action_type")

    if action_type == "select_piece":
        return SelectPieceAction.model_validate(payload)
    elif action_type == "move_piece":
        return MovePieceAction.model_validate(payload)
    elif action_type == "start_next_round":
        return StartNextRoundAction.model_validate(payload)
    elif action_type == "reset_game":
        return ResetGameAction.model_validate(payload)
    else:
        raise ValueError(f"Unknown action type: {action_type}")
