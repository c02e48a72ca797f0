"""
游戏逻辑模块
Game Module
"""
from .match_controller import MatchController, MatchView
from .game_logic import (
    Move, GameRules, RoundOutcome, MatchOutcome, MatchEngine, MatchState, RoundResult
)
from .state_machine import MatchStage, StageMachine

__all__ = [
    'MatchController',
    'MatchView',
    'Move',
    'GameRules',
    'RoundOutcome',
    'MatchOutcome',
    'MatchEngine',
    'MatchState',
    'RoundResult',
    'MatchStage',
    'StageMachine'
]
