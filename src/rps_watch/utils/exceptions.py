"""
自定义异常类
Custom Exception Classes
"""
from typing import Optional


class GameException(Exception):
    """游戏逻辑异常"""
    def __init__(self, message: str, game_state: Optional[str] = None):
        super().__init__(message)
        self.game_state = game_state
        self.message = message


class InvalidStageException(GameException):
    """在错误阶段调用操作（调用方违反前置条件）"""
    def __init__(self, message: str, game_state: Optional[str] = None,
                 expected: Optional[tuple] = None):
        super().__init__(message, game_state=game_state)
        self.expected = expected or ()


class InvalidMoveException(GameException):
    """无法识别的出拳"""
    def __init__(self, message: str, value: Optional[object] = None):
        super().__init__(message)
        self.value = value


class StorageException(Exception):
    """战绩存储异常"""
    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path
        self.message = message


class ConfigurationException(Exception):
    """配置异常"""
    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message)
        self.config_key = config_key
        self.message = message
