"""Legal move calculation for pieces."""

import logging

logger = logging.getLogger(__name__)

from pawn_game.schemas.game_engine import GameState, Move, Piece, Position

from .board import get_piece_at, is_valid_position
from .players import get_player_config


def get_valid_moves(state: GameState, piece: Piece) -> list[Position]:
    """Determine the legal destinations for a piece.

    A move is legal if:
    - The piece is alive and belongs to the player whose turn it is
    - Forward (same column, one row ahead): the cell is on the board and empty
    - Diagonal (one row ahead, column +/-1): the cell is on the board and
      holds an opponent piece; diagonals are capture-only

    There is no backward, sideways or forward-capturing move.

    Args:
        state: Current game state.
        piece: The piece to compute destinations for.

    Returns:
        Destinations ordered forward, left diagonal, right diagonal.
    """
    if not piece.alive or piece.owner != state.current_player:
        return []

    board = state.board_setup
    direction = get_player_config(piece.owner, board).direction
    next_row = piece.position.row + direction
    moves: list[Position] = []

    forward = Position(row=next_row, col=piece.position.col)
    if is_valid_position(forward, board) and get_piece_at(state, forward) is None:
        moves.append(forward)

    for col_delta in (-1, 1):
        diagonal = Position(row=next_row, col=piece.position.col + col_delta)
        if not is_valid_position(diagonal, board):
            continue
        target = get_piece_at(state, diagonal)
        if target is not None and target.owner != piece.owner:
            moves.append(diagonal)

    logger.debug(
        "Valid moves: piece=%s, from=(%d,%d), moves=%s",
        piece.piece_id,
        piece.position.row,
        piece.position.col,
        [(m.row, m.col) for m in moves],
    )
    return moves


def is_valid_move(state: GameState, piece: Piece, to: Position) -> bool:
    return to in get_valid_moves(state, piece)


def get_legal_moves(state: GameState) -> list[Move]:
    """List every legal move available to the current player.

    Pieces are visited in state order; each piece contributes its moves in
    get_valid_moves() order.
    """
    legal_moves: list[Move] = []

    for piece in state.pieces:
        if not piece.alive or piece.owner != state.current_player:
            continue

        for destination in get_valid_moves(state, piece):
            target = get_piece_at(state, destination)
            legal_moves.append(
                Move(
                    piece_id=piece.piece_id,
                    player=piece.owner,
                    from_position=piece.position,
                    to_position=destination,
                    is_capture=target is not None,
                    captured_piece_id=target.piece_id if target else None,
                )
            )

    return legal_moves


def has_any_legal_moves(state: GameState) -> bool:
    """Quick check if the current player can move at all.

    A False result during play means the side to move is blocked; the engine
    reports it but does not resolve it.
    """
    return any(
        get_valid_moves(state, piece)
        for piece in state.pieces
        if piece.alive and piece.owner == state.current_player
    )
