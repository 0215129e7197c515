import logging
import random

logger = logging.getLogger(__name__)

from pawn_game.config import Settings, get_settings
from pawn_game.schemas.game_engine import BoardSetup, GameState, PlayerId

from .engine.rounds import new_match_state


def validate_board_setup(board_setup: BoardSetup) -> None:
    """Validate board setup before initializing a match."""
    if board_setup.rows < 4:
        raise ValueError("Board must have at least 4 rows.")
    if board_setup.cols < 1:
        raise ValueError("Board must have at least 1 column.")
    if not 1 <= board_setup.pieces_per_player <= board_setup.cols:
        raise ValueError(
            f"Pieces per player must be between 1 and {board_setup.cols}."
        )
    if board_setup.rounds_to_win < 1:
        raise ValueError("Rounds to win must be at least 1.")
    if board_setup.total_rounds != 2 * board_setup.rounds_to_win - 1:
        raise ValueError(
            f"A first-to-{board_setup.rounds_to_win} match is best of "
            f"{2 * board_setup.rounds_to_win - 1}, not {board_setup.total_rounds}."
        )


def create_board_setup(settings: Settings | None = None) -> BoardSetup:
    """Create board setup based on application settings."""
    settings = settings or get_settings()
    return BoardSetup(
        rows=settings.GRID_ROWS,
        cols=settings.GRID_COLS,
        pieces_per_player=settings.PIECES_PER_PLAYER,
        rounds_to_win=settings.ROUNDS_TO_WIN,
        total_rounds=settings.TOTAL_ROUNDS,
    )


def choose_starting_player(rng: random.Random | None = None) -> PlayerId:
    """Pick the starting player at random."""
    chooser = rng or random
    return chooser.choice([PlayerId.ONE, PlayerId.TWO])


def create_initial_state(
    starting_player: PlayerId, board_setup: BoardSetup | None = None
) -> GameState:
    """
    Validate board setup and return the state for round 1 of a new match.

    Args:
        starting_player: The player who moves first in round 1.
        board_setup: Board and match configuration; the default 5x3
                     best-of-3 board when omitted. Use create_board_setup()
                     to build one from Settings.

    Returns:
        A GameState in PLAYING phase with all pieces on their start rows.

    Raises:
        ValueError: If board setup is invalid.
    """
    if board_setup is None:
        board_setup = BoardSetup()
    validate_board_setup(board_setup)

    logger.info(
        "Creating match: starting_player=%s, board=%dx%d, first_to=%d",
        starting_player.value,
        board_setup.rows,
        board_setup.cols,
        board_setup.rounds_to_win,
    )
    return new_match_state(starting_player, board_setup)


def reset_game(starting_player: PlayerId, board_setup: BoardSetup | None = None) -> GameState:
    """Start over with a brand-new match; no prior state is consulted."""
    return create_initial_state(starting_player, board_setup)
