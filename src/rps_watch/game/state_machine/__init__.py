"""
比赛阶段状态机模块
Match Stage Machine Module
"""
from .match_stage import MatchStage
from .stage_machine import StageMachine

__all__ = ['MatchStage', 'StageMachine']
