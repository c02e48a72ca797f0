"""
比赛引擎测试
Match Engine Tests
"""
import random

import pytest

from rps_watch.game import MatchEngine, MatchStage, Move, RoundOutcome, MatchOutcome
from rps_watch.storage import MemoryScoreStore, ScoreRecord
from rps_watch.utils.exceptions import (
    InvalidStageException, InvalidMoveException, ConfigurationException
)

# 玩家出石头时对手的出拳
WIN = Move.SCISSORS
LOSE = Move.PAPER
DRAW = Move.ROCK


def play(engine, opponent_move_outcomes):
    """玩家每回合出石头并推进，直到用完对手出拳"""
    for _ in opponent_move_outcomes:
        engine.select_move(Move.ROCK)
        if engine.get_stage() == MatchStage.REVEALED:
            engine.advance()


def test_initial_state(make_engine):
    engine = make_engine()
    state = engine.get_state()
    assert state.stage == MatchStage.SELECTING
    assert state.round_number == 1
    assert (state.player_round_wins, state.opponent_round_wins) == (0, 0)
    assert state.last_round_outcome is None
    assert engine.wins_needed == 2


def test_select_move_win(make_engine):
    """赢一回合：玩家回合数加一，进入揭晓阶段"""
    engine = make_engine([WIN])
    assert engine.select_move(Move.ROCK) == RoundOutcome.WIN
    state = engine.get_state()
    assert state.stage == MatchStage.REVEALED
    assert state.player_round_wins == 1
    assert state.opponent_round_wins == 0
    assert state.player_move == Move.ROCK
    assert state.opponent_move == Move.SCISSORS
    assert state.last_round_outcome == RoundOutcome.WIN


def test_select_move_lose(make_engine):
    engine = make_engine([LOSE])
    assert engine.select_move(Move.ROCK) == RoundOutcome.LOSE
    assert engine.get_state().opponent_round_wins == 1
    assert engine.get_state().player_round_wins == 0


def test_draw_replays_same_round(make_engine):
    """平局不计分，推进后回到同一回合"""
    engine = make_engine([DRAW])
    assert engine.select_move(Move.ROCK) == RoundOutcome.DRAW
    state = engine.get_state()
    assert state.round_number == 1
    assert (state.player_round_wins, state.opponent_round_wins) == (0, 0)
    assert not engine.is_match_decided()

    assert engine.advance() == MatchStage.SELECTING
    assert engine.get_state().round_number == 1


def test_two_straight_wins_end_match(make_engine, store):
    """2-0 后比赛已分胜负，推进直接结束，玩家获胜"""
    engine = make_engine([WIN, WIN])
    engine.select_move(Move.ROCK)
    assert engine.advance() == MatchStage.SELECTING
    assert engine.get_state().round_number == 2

    engine.select_move(Move.ROCK)
    assert engine.is_match_decided()
    assert engine.advance() == MatchStage.MATCH_OVER

    state = engine.get_state()
    assert state.match_outcome == MatchOutcome.PLAYER_WINS
    assert (state.player_round_wins, state.opponent_round_wins) == (2, 0)
    assert state.matches_won == 1
    assert state.matches_lost == 0
    assert store.load().matches_won == 1


def test_third_round_decides_match(make_engine, store):
    """1-1 进入第三回合，输掉第三回合则对手获胜，累计负场加一"""
    engine = make_engine([WIN, LOSE, LOSE])
    play(engine, [WIN, LOSE])
    state = engine.get_state()
    assert state.round_number == 3
    assert (state.player_round_wins, state.opponent_round_wins) == (1, 1)

    engine.select_move(Move.ROCK)
    assert engine.is_match_decided()
    assert engine.finish_match() == MatchOutcome.OPPONENT_WINS
    assert engine.get_stage() == MatchStage.MATCH_OVER
    assert engine.get_state().matches_lost == 1
    assert engine.get_state().matches_won == 0
    assert store.load().matches_lost == 1


def test_draw_in_final_round_is_replayed(make_engine):
    """第三回合平局不结束比赛"""
    engine = make_engine([WIN, LOSE, DRAW, WIN])
    play(engine, [WIN, LOSE])
    engine.select_move(Move.ROCK)
    assert not engine.is_match_decided()
    assert engine.advance() == MatchStage.SELECTING
    assert engine.get_state().round_number == 3

    engine.select_move(Move.ROCK)
    assert engine.advance() == MatchStage.MATCH_OVER
    assert engine.get_state().match_outcome == MatchOutcome.PLAYER_WINS


def test_round_history(make_engine):
    engine = make_engine([DRAW, WIN])
    play(engine, [DRAW, WIN])
    history = engine.get_round_history()
    assert [r.round_number for r in history] == [1, 1]
    assert [r.outcome for r in history] == [RoundOutcome.DRAW, RoundOutcome.WIN]
    assert history[-1].to_dict()['opponent_move'] == "scissors"
    assert engine.get_last_round_result() is history[-1]


def test_select_move_outside_selecting_raises(make_engine):
    """揭晓阶段再次出拳抛出异常，状态不变"""
    engine = make_engine([WIN, WIN])
    engine.select_move(Move.ROCK)
    with pytest.raises(InvalidStageException):
        engine.select_move(Move.ROCK)
    assert engine.get_state().player_round_wins == 1
    assert engine.get_stage() == MatchStage.REVEALED


def test_advance_outside_revealed_raises(make_engine):
    engine = make_engine()
    with pytest.raises(InvalidStageException):
        engine.advance()
    assert engine.get_stage() == MatchStage.SELECTING


def test_finish_before_decided_raises(make_engine, store):
    """未分胜负时不能结束比赛"""
    engine = make_engine([WIN])
    engine.select_move(Move.ROCK)
    with pytest.raises(InvalidStageException):
        engine.finish_match()
    assert engine.get_stage() == MatchStage.REVEALED
    assert engine.get_state().matches_won == 0
    assert store.load() == ScoreRecord(0, 0)


def test_select_move_rejects_non_move(make_engine):
    engine = make_engine()
    with pytest.raises(InvalidMoveException):
        engine.select_move("rock")


def test_soft_reset_keeps_lifetime_counters(make_engine):
    engine = make_engine([WIN, WIN])
    play(engine, [WIN, WIN])
    assert engine.get_stage() == MatchStage.MATCH_OVER

    engine.reset_match(hard=False)
    state = engine.get_state()
    assert state.stage == MatchStage.SELECTING
    assert state.round_number == 1
    assert (state.player_round_wins, state.opponent_round_wins) == (0, 0)
    assert state.last_round_outcome is None
    assert state.match_outcome is None
    assert state.matches_won == 1
    assert engine.get_round_history() == []


def test_soft_reset_is_idempotent(make_engine):
    engine = make_engine([LOSE])
    engine.select_move(Move.ROCK)
    for _ in range(3):
        engine.reset_match(hard=False)
        state = engine.get_state()
        assert state.stage == MatchStage.SELECTING
        assert state.round_number == 1
        assert (state.player_round_wins, state.opponent_round_wins) == (0, 0)


def test_hard_reset_zeroes_lifetime_counters(make_engine, store):
    engine = make_engine([WIN, WIN])
    play(engine, [WIN, WIN])
    engine.reset_match(hard=True)
    assert engine.get_score_record().matches_won == 0
    assert engine.get_score_record().matches_lost == 0
    assert store.load().matches_won == 0


def test_lifetime_counters_loaded_from_store(make_engine):
    """启动时从存储读取累计战绩，并在其基础上累加"""
    saved = MemoryScoreStore(matches_won=4, matches_lost=2)
    engine = make_engine([LOSE, LOSE], score_store=saved)
    assert engine.get_state().matches_won == 4
    play(engine, [LOSE, LOSE])
    assert saved.load().matches_lost == 3
    assert saved.load().matches_won == 4


def test_lifetime_counters_increase_once_per_match(make_engine):
    engine = make_engine([WIN, WIN, LOSE, LOSE])
    play(engine, [WIN, WIN])
    engine.reset_match()
    play(engine, [LOSE, LOSE])
    record = engine.get_score_record()
    assert (record.matches_won, record.matches_lost) == (1, 1)


def test_best_of_five(make_engine):
    """五局三胜：2-0 尚未分出胜负"""
    engine = make_engine([WIN, WIN, LOSE, WIN], max_rounds=5)
    assert engine.wins_needed == 3
    play(engine, [WIN, WIN])
    assert engine.get_state().round_number == 3
    play(engine, [LOSE, WIN])
    assert engine.get_state().match_outcome == MatchOutcome.PLAYER_WINS


@pytest.mark.parametrize("max_rounds", [0, 2, -3, True, "3"])
def test_invalid_max_rounds(max_rounds):
    with pytest.raises(ConfigurationException):
        MatchEngine(max_rounds=max_rounds)


def test_random_matches_respect_invariants():
    """随机对局中比分、回合数与累计战绩始终满足约束"""
    engine = MatchEngine(rng=random.Random(1234))
    player_rng = random.Random(99)
    for _ in range(200):
        engine.reset_match()
        while engine.get_stage() != MatchStage.MATCH_OVER:
            state = engine.get_state()
            assert 1 <= state.round_number <= 3
            assert 0 <= state.player_round_wins <= 2
            assert 0 <= state.opponent_round_wins <= 2
            engine.select_move(player_rng.choice(list(Move)))
            engine.advance()
        state = engine.get_state()
        assert state.player_round_wins != state.opponent_round_wins
        assert max(state.player_round_wins, state.opponent_round_wins) >= 1
    record = engine.get_score_record()
    assert record.total_matches == 200
