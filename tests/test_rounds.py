"""Tests for round transitions and a full best-of-3 match.

Critical scenarios tested:
- Next round alternates the starting player regardless of the winner
- Scores carry over, round counter increments, board is reset
- A complete three-round match reaching MATCH_END
"""

import pytest

from pawn_game.schemas.game_engine import GamePhase, GameState
from pawn_game.services.game import move_piece, reset_game, select_piece, start_next_round
from pawn_game.services.game.engine import create_initial_pieces

from .conftest import PLAYER_ONE, PLAYER_TWO, play, pos


def _win_round_as_player_one(state: GameState) -> GameState:
    """Player one to move from a fresh board; player one wins in five plies."""
    state = play(state, "p1-1", 3, 1)
    state = play(state, "p2-3", 3, 3)
    state = play(state, "p1-1", 4, 2)  # captures p2-2
    state = play(state, "p2-1", 3, 1)
    return play(state, "p1-1", 5, 2)


def _win_round_as_player_two(state: GameState) -> GameState:
    """Player two to move from a fresh board; player two wins in five plies."""
    state = play(state, "p2-1", 3, 1)
    state = play(state, "p1-3", 3, 3)
    state = play(state, "p2-1", 2, 2)  # captures p1-2
    state = play(state, "p1-1", 3, 1)
    return play(state, "p2-1", 1, 2)


class TestStartNextRound:
    """Test the transition from ROUND_END back to PLAYING."""

    def test_next_round_resets_board_and_keeps_scores(self, initial_state: GameState):
        ended = _win_round_as_player_one(initial_state)
        assert ended.phase == GamePhase.ROUND_END

        state = start_next_round(ended)

        assert state.phase == GamePhase.PLAYING
        assert state.round == ended.round + 1
        assert state.scores == ended.scores
        assert state.pieces == create_initial_pieces(state.board_setup)
        assert all(p.alive for p in state.pieces)
        assert state.round_winner is None
        assert state.selected_piece is None
        assert state.valid_moves == []

    @pytest.mark.parametrize("starter", [PLAYER_ONE, PLAYER_TWO])
    def test_starting_player_alternates(self, starter, about_to_win_state: GameState):
        """The other player starts next, whoever won."""
        state = about_to_win_state.model_copy(update={"starting_player": starter})
        ended = move_piece(select_piece(state, "p1-1"), pos(5, 2))
        assert ended.round_winner == PLAYER_ONE

        state = start_next_round(ended)

        expected = PLAYER_TWO if starter == PLAYER_ONE else PLAYER_ONE
        assert state.starting_player == expected
        assert state.current_player == expected

    def test_next_round_only_from_round_end(self, initial_state: GameState):
        assert start_next_round(initial_state) is initial_state

    def test_next_round_not_allowed_after_match_end(self, about_to_win_state: GameState):
        state = about_to_win_state.model_copy(update={"scores": {PLAYER_ONE: 1, PLAYER_TWO: 0}})
        ended = move_piece(select_piece(state, "p1-1"), pos(5, 2))
        assert ended.phase == GamePhase.MATCH_END

        assert start_next_round(ended) is ended


class TestFullMatch:
    """Play a whole best-of-3 match through the public operations."""

    def test_three_round_match(self, initial_state: GameState):
        # Round 1: player one starts and wins
        state = _win_round_as_player_one(initial_state)
        assert state.phase == GamePhase.ROUND_END
        assert state.scores == {PLAYER_ONE: 1, PLAYER_TWO: 0}

        # Round 2: player two starts and wins
        state = start_next_round(state)
        assert state.round == 2
        assert state.current_player == PLAYER_TWO
        state = _win_round_as_player_two(state)
        assert state.phase == GamePhase.ROUND_END
        assert state.round_winner == PLAYER_TWO
        assert state.scores == {PLAYER_ONE: 1, PLAYER_TWO: 1}

        # Round 3: player one starts again and takes the match
        state = start_next_round(state)
        assert state.round == 3
        assert state.current_player == PLAYER_ONE
        state = _win_round_as_player_one(state)

        assert state.phase == GamePhase.MATCH_END
        assert state.match_winner == PLAYER_ONE
        assert state.scores == {PLAYER_ONE: 2, PLAYER_TWO: 1}
        assert state.round == state.board_setup.total_rounds

    def test_reset_after_match(self, initial_state: GameState):
        state = _win_round_as_player_one(initial_state)
        state = start_next_round(state)
        state = _win_round_as_player_two(state)
        state = start_next_round(state)
        state = _win_round_as_player_one(state)
        assert state.phase == GamePhase.MATCH_END

        fresh = reset_game(PLAYER_TWO, state.board_setup)

        assert fresh.phase == GamePhase.PLAYING
        assert fresh.round == 1
        assert fresh.scores == {PLAYER_ONE: 0, PLAYER_TWO: 0}
        assert fresh.current_player == PLAYER_TWO
        assert fresh.starting_player == PLAYER_TWO
        assert fresh.round_winner is None
        assert fresh.match_winner is None
        assert fresh.pieces == create_initial_pieces()
