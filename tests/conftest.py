"""Shared fixtures for game engine tests."""

import pytest

from pawn_game.schemas.game_engine import (
    BoardSetup,
    GamePhase,
    GameState,
    Piece,
    PlayerId,
    Position,
)
from pawn_game.services.game import create_initial_state, move_piece, select_piece

PLAYER_ONE = PlayerId.ONE
PLAYER_TWO = PlayerId.TWO


def pos(row: int, col: int) -> Position:
    """Shorthand for a Position."""
    return Position(row=row, col=col)


def create_piece(piece_id: str, row: int, col: int, alive: bool = True) -> Piece:
    """Helper to create a piece; the owner is taken from the id prefix ("p1-2")."""
    return Piece(
        piece_id=piece_id,
        owner=PlayerId(piece_id.split("-")[0]),
        position=pos(row, col),
        alive=alive,
    )


def create_state(
    pieces: list[Piece],
    current_player: PlayerId = PLAYER_ONE,
    starting_player: PlayerId | None = None,
    scores: dict[PlayerId, int] | None = None,
    phase: GamePhase = GamePhase.PLAYING,
    **overrides,
) -> GameState:
    """Helper to create a mid-round state from an explicit piece layout."""
    return GameState(
        pieces=pieces,
        current_player=current_player,
        starting_player=starting_player or current_player,
        scores=scores if scores is not None else {PLAYER_ONE: 0, PLAYER_TWO: 0},
        phase=phase,
        board_setup=BoardSetup(),
        **overrides,
    )


def play(state: GameState, piece_id: str, row: int, col: int) -> GameState:
    """Select a piece and move it, asserting both steps were accepted."""
    selected = select_piece(state, piece_id)
    assert selected.selected_piece == piece_id, f"{piece_id} could not be selected"
    moved = move_piece(selected, pos(row, col))
    assert moved is not selected, f"{piece_id} could not move to ({row}, {col})"
    return moved


@pytest.fixture
def standard_board_setup() -> BoardSetup:
    """Default 5x3 board, first to 2 rounds."""
    return BoardSetup()


@pytest.fixture
def initial_state(standard_board_setup: BoardSetup) -> GameState:
    """Fresh match with player one to move."""
    return create_initial_state(PLAYER_ONE, standard_board_setup)


@pytest.fixture
def initial_state_player_two(standard_board_setup: BoardSetup) -> GameState:
    """Fresh match with player two to move."""
    return create_initial_state(PLAYER_TWO, standard_board_setup)


@pytest.fixture
def about_to_win_state() -> GameState:
    """Player one to move with p1-1 one step from the win row (row 5).

    p2-3 sits on (5, 3) so p1-1 can also win by capturing diagonally.
    """
    pieces = [
        create_piece("p1-1", 4, 2),
        create_piece("p1-2", 2, 1),
        create_piece("p1-3", 2, 3),
        create_piece("p2-1", 4, 1),
        create_piece("p2-2", 3, 2, alive=False),
        create_piece("p2-3", 5, 3),
    ]
    return create_state(pieces, current_player=PLAYER_ONE)
