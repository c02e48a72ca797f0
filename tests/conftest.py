"""
测试公共夹具
Shared Test Fixtures
"""
import pytest

from rps_watch.game import MatchEngine, MatchController
from rps_watch.storage import MemoryScoreStore


class SequenceRandom:
    """按给定顺序返回对手出拳的随机源"""

    def __init__(self, moves):
        self.moves = list(moves)
        self.calls = 0

    def choice(self, seq):
        move = self.moves[self.calls]
        assert move in seq
        self.calls += 1
        return move


@pytest.fixture
def store():
    return MemoryScoreStore()


@pytest.fixture
def make_engine(store):
    """创建对手出拳可控的比赛引擎"""
    def _make(opponent_moves=(), score_store=None, max_rounds=3):
        return MatchEngine(score_store=score_store or store,
                           rng=SequenceRandom(opponent_moves),
                           max_rounds=max_rounds)
    return _make


@pytest.fixture
def make_controller(make_engine):
    def _make(opponent_moves=(), **kwargs):
        return MatchController(make_engine(opponent_moves, **kwargs))
    return _make

