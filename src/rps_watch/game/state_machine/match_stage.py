"""
比赛阶段枚举
Match Stage Enumeration
"""
from enum import Enum, auto


class MatchStage(Enum):
    """比赛阶段枚举"""
    SELECTING = auto()    # 等待玩家出拳
    REVEALED = auto()     # 本回合结果已揭晓
    MATCH_OVER = auto()   # 比赛结束，等待重置
    
    def __str__(self):
        return self.name
