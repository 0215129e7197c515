"""Board geometry: position validity, occupancy lookups and starting layout."""

from pawn_game.schemas.game_engine import BoardSetup, GameState, Piece, PlayerId, Position

from .players import get_player_config

DEFAULT_BOARD_SETUP = BoardSetup()


def is_valid_position(position: Position, board_setup: BoardSetup | None = None) -> bool:
    """Return True if position lies within [1, rows] x [1, cols]."""
    board = board_setup or DEFAULT_BOARD_SETUP
    return 1 <= position.row <= board.rows and 1 <= position.col <= board.cols


def get_piece_at(state: GameState, position: Position) -> Piece | None:
    """Return the alive piece occupying position, or None if the cell is empty.

    Dead pieces stay in state.pieces with their last position but never
    occupy a cell.
    """
    return next(
        (p for p in state.pieces if p.alive and p.position == position),
        None,
    )


def get_piece_by_id(state: GameState, piece_id: str) -> Piece | None:
    return next((p for p in state.pieces if p.piece_id == piece_id), None)


def create_initial_pieces(board_setup: BoardSetup | None = None) -> list[Piece]:
    """Create a fresh, all-alive piece set at the starting rows.

    Each player gets one piece per column 1..pieces_per_player on their start
    row; ids are "<player>-<col>", player ONE's pieces first.
    """
    board = board_setup or DEFAULT_BOARD_SETUP
    pieces: list[Piece] = []

    for player in (PlayerId.ONE, PlayerId.TWO):
        start_row = get_player_config(player, board).start_row
        for col in range(1, board.pieces_per_player + 1):
            pieces.append(
                Piece(
                    piece_id=f"{player.value}-{col}",
                    owner=player,
                    position=Position(row=start_row, col=col),
                    alive=True,
                )
            )

    return pieces
