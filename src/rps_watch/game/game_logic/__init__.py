"""
游戏逻辑模块
Game Logic Module
"""
from .move import Move
from .game_rules import GameRules, RoundOutcome, MatchOutcome
from .match_engine import MatchEngine, MatchState, RoundResult

__all__ = [
    'Move',
    'GameRules',
    'RoundOutcome',
    'MatchOutcome',
    'MatchEngine',
    'MatchState',
    'RoundResult'
]
