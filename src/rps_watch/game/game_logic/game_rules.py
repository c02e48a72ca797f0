"""
游戏规则实现
Game Rules Implementation
"""
from enum import Enum
from .move import Move
from ...utils.logger import setup_logger

logger = setup_logger("RPS.GameRules")


class RoundOutcome(Enum):
    """回合结果枚举（玩家视角）"""
    WIN = "win"      # 玩家获胜
    LOSE = "lose"    # 对手获胜
    DRAW = "draw"    # 平局
    
    @property
    def label(self) -> str:
        return _ROUND_LABELS[self]


class MatchOutcome(Enum):
    """整场比赛结果枚举"""
    PLAYER_WINS = "player_wins"
    OPPONENT_WINS = "opponent_wins"
    
    @property
    def label(self) -> str:
        return _MATCH_LABELS[self]


_ROUND_LABELS = {
    RoundOutcome.WIN: "Victory!",
    RoundOutcome.LOSE: "Defeat!",
    RoundOutcome.DRAW: "Tie!",
}

_MATCH_LABELS = {
    MatchOutcome.PLAYER_WINS: "Champion!",
    MatchOutcome.OPPONENT_WINS: "CPU Wins!",
}


class GameRules:
    """游戏规则类"""
    
    # 胜负规则：key胜value
    WIN_RULES = {
        Move.ROCK: Move.SCISSORS,      # 石头胜剪刀
        Move.PAPER: Move.ROCK,         # 布胜石头
        Move.SCISSORS: Move.PAPER      # 剪刀胜布
    }
    
    @staticmethod
    def beats(move: Move, other: Move) -> bool:
        """判断 move 是否战胜 other"""
        return GameRules.WIN_RULES[move] == other
    
    @staticmethod
    def judge(player_move: Move, opponent_move: Move) -> RoundOutcome:
        """
        判断回合结果
        
        Args:
            player_move: 玩家出拳
            opponent_move: 对手出拳
            
        Returns:
            RoundOutcome: 玩家视角的回合结果
        """
        if player_move == opponent_move:
            logger.debug(f"平局: {player_move}")
            return RoundOutcome.DRAW
        
        if GameRules.beats(player_move, opponent_move):
            logger.debug(f"玩家获胜: {player_move} 胜 {opponent_move}")
            return RoundOutcome.WIN
        
        logger.debug(f"对手获胜: {opponent_move} 胜 {player_move}")
        return RoundOutcome.LOSE
