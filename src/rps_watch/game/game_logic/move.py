"""
出拳枚举类型
Move Enumeration
"""
from enum import Enum
from ...utils.exceptions import InvalidMoveException

VARIATION_SELECTOR = "\ufe0f"


class Move(Enum):
    """出拳类型枚举"""
    ROCK = "rock"          # 石头
    PAPER = "paper"        # 布
    SCISSORS = "scissors"  # 剪刀
    
    def __str__(self):
        return self.value
    
    @property
    def symbol(self) -> str:
        """表盘上显示的手势符号"""
        return _SYMBOLS[self]
    
    @classmethod
    def from_string(cls, value: str) -> "Move":
        """
        从字符串创建出拳枚举
        
        接受完整名称（rock, paper, scissors）、首字母（r, p, s）或手势符号，
        不区分大小写，忽略 emoji 变体选择符 U+FE0F。
        
        Args:
            value: 出拳字符串
            
        Returns:
            Move: 出拳枚举值
            
        Raises:
            InvalidMoveException: 无法识别的字符串
        """
        text = str(value).replace(VARIATION_SELECTOR, "").strip().lower()
        for move in cls:
            if text in (move.value, move.value[0], move.symbol.replace(VARIATION_SELECTOR, "")):
                return move
        raise InvalidMoveException(f"无法识别的出拳: {value!r}", value=value)


_SYMBOLS = {
    Move.ROCK: "✊",
    Move.PAPER: "✋",
    Move.SCISSORS: "✌️",
}
