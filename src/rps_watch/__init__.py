"""
剪刀石头布手表游戏
Rock Paper Scissors Watch Game
"""
from .game import MatchController, MatchEngine, MatchStage, Move, RoundOutcome, MatchOutcome
from .storage import ScoreRecord, MemoryScoreStore, YamlScoreStore

__version__ = "1.0.0"

__all__ = [
    'MatchController',
    'MatchEngine',
    'MatchStage',
    'Move',
    'RoundOutcome',
    'MatchOutcome',
    'ScoreRecord',
    'MemoryScoreStore',
    'YamlScoreStore'
]
