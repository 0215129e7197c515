"""Round and match progression: scoring, match end and next-round setup."""

import logging

logger = logging.getLogger(__name__)

from pawn_game.schemas.game_engine import (
    BoardSetup,
    GamePhase,
    GameState,
    PlayerId,
    empty_scores,
)

from .board import create_initial_pieces
from .events import AnyGameEvent, MatchStarted, MatchWon, RoundStarted, RoundWon
from .players import get_opponent
from .validation import ProcessResult


def handle_round_win(
    state: GameState, winner: PlayerId
) -> tuple[GameState, list[AnyGameEvent]]:
    """Score a round win and move to ROUND_END or MATCH_END.

    The board is left as it was after the winning move; it is only reset by
    process_next_round().

    Args:
        state: State after the winning move has been applied.
        winner: The player whose piece reached its win row.

    Returns:
        Tuple of (new state, events).
    """
    new_scores = dict(state.scores)
    new_scores[winner] = new_scores.get(winner, 0) + 1
    events: list[AnyGameEvent] = [
        RoundWon(winner=winner, round=state.round, scores=dict(new_scores))
    ]

    update = {
        "scores": new_scores,
        "round_winner": winner,
        "selected_piece": None,
        "valid_moves": [],
    }

    if new_scores[winner] >= state.board_setup.rounds_to_win:
        logger.info(
            "Match won: winner=%s, scores=%s, rounds_played=%d",
            winner.value,
            {p.value: s for p, s in new_scores.items()},
            state.round,
        )
        events.append(
            MatchWon(winner=winner, scores=dict(new_scores), rounds_played=state.round)
        )
        update["match_winner"] = winner
        update["phase"] = GamePhase.MATCH_END
    else:
        logger.info(
            "Round won: winner=%s, round=%d, scores=%s",
            winner.value,
            state.round,
            {p.value: s for p, s in new_scores.items()},
        )
        update["phase"] = GamePhase.ROUND_END

    return state.model_copy(update=update), events


def process_next_round(state: GameState) -> ProcessResult:
    """Reset the board for the next round of the match.

    The player who did not start the finished round starts the next one,
    regardless of who won it. Scores carry over.

    Args:
        state: Current game state (must be ROUND_END).

    Returns:
        ProcessResult with a fresh board in PLAYING phase.
    """
    next_starter = get_opponent(state.starting_player)
    next_round = state.round + 1

    new_state = state.model_copy(
        update={
            "pieces": create_initial_pieces(state.board_setup),
            "current_player": next_starter,
            "starting_player": next_starter,
            "round": next_round,
            "scores": dict(state.scores),
            "phase": GamePhase.PLAYING,
            "selected_piece": None,
            "valid_moves": [],
            "round_winner": None,
        }
    )

    logger.info(
        "Round started: round=%d/%d, starting_player=%s",
        next_round,
        state.board_setup.total_rounds,
        next_starter.value,
    )
    return ProcessResult.ok(
        new_state, [RoundStarted(round=next_round, starting_player=next_starter)]
    )


def is_match_over(state: GameState) -> bool:
    return state.phase == GamePhase.MATCH_END


def get_winner(state: GameState) -> PlayerId | None:
    """Return the match winner, or None while the match is undecided."""
    return state.match_winner if is_match_over(state) else None


def new_match_state(starting_player: PlayerId, board_setup: BoardSetup) -> GameState:
    """Build the state at the start of round 1 of a new match."""
    return GameState(
        pieces=create_initial_pieces(board_setup),
        current_player=starting_player,
        round=1,
        scores=empty_scores(),
        phase=GamePhase.PLAYING,
        selected_piece=None,
        valid_moves=[],
        starting_player=starting_player,
        round_winner=None,
        match_winner=None,
        board_setup=board_setup,
    )


def process_reset(starting_player: PlayerId, board_setup: BoardSetup) -> ProcessResult:
    """Discard the current match and start a new one.

    The new state starts its own event sequence at 0.
    """
    logger.info("Match started: starting_player=%s", starting_player.value)
    return ProcessResult.ok(
        new_match_state(starting_player, board_setup),
        [MatchStarted(starting_player=starting_player)],
    )
