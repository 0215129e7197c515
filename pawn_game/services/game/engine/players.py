"""Per-player rules: display symbol, forward direction, start and win rows."""

from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

from pawn_game.constants import GRID_ROWS, PLAYER_ONE_START_ROW
from pawn_game.schemas.game_engine import BoardSetup, PlayerConfig, PlayerId


@lru_cache
def build_player_configs(rows: int) -> Mapping[PlayerId, PlayerConfig]:
    """Build the read-only player table for a board with the given row count.

    Player ONE moves down the board (row increases) and wins on the last row;
    player TWO mirrors it, moving up and winning on row 1.
    """
    return MappingProxyType(
        {
            PlayerId.ONE: PlayerConfig(
                player=PlayerId.ONE,
                symbol="O",
                direction=1,
                start_row=PLAYER_ONE_START_ROW,
                win_row=rows,
            ),
            PlayerId.TWO: PlayerConfig(
                player=PlayerId.TWO,
                symbol="X",
                direction=-1,
                start_row=rows - PLAYER_ONE_START_ROW + 1,
                win_row=1,
            ),
        }
    )


# Default table for the standard 5-row board
PLAYERS = build_player_configs(GRID_ROWS)


def get_player_config(player: PlayerId, board_setup: BoardSetup | None = None) -> PlayerConfig:
    if board_setup is None:
        return PLAYERS[player]
    return build_player_configs(board_setup.rows)[player]


def get_opponent(player: PlayerId) -> PlayerId:
    return PlayerId.TWO if player == PlayerId.ONE else PlayerId.ONE
