"""
错误处理工具模块
Error Handler Utility Module
"""
import traceback
from typing import Optional, Callable, Dict
from .exceptions import (
    GameException, InvalidStageException, InvalidMoveException,
    StorageException, ConfigurationException
)
from .logger import setup_logger

logger = setup_logger("RPS.ErrorHandler")


class ErrorHandler:
    """错误处理器类"""
    
    def __init__(self):
        """初始化错误处理器"""
        self.error_callbacks: Dict[type, Callable] = {}
        self.setup_default_handlers()
    
    def setup_default_handlers(self):
        """设置默认错误处理函数"""
        self.error_callbacks[GameException] = self._handle_game_error
        self.error_callbacks[InvalidStageException] = self._handle_stage_error
        self.error_callbacks[InvalidMoveException] = self._handle_move_error
        self.error_callbacks[StorageException] = self._handle_storage_error
        self.error_callbacks[ConfigurationException] = self._handle_config_error
    
    def register_handler(self, exception_type: type, handler: Callable):
        """
        注册错误处理函数
        
        Args:
            exception_type: 异常类型
            handler: 处理函数，签名为 handler(exception, context)
        """
        self.error_callbacks[exception_type] = handler
        logger.debug(f"注册错误处理函数: {exception_type.__name__}")
    
    def _find_handler(self, exception_type: type) -> Optional[Callable]:
        """按继承顺序查找最具体的处理函数"""
        for exc_type in exception_type.__mro__:
            if exc_type in self.error_callbacks:
                return self.error_callbacks[exc_type]
        return None
    
    def handle(self, exception: Exception, context: Optional[str] = None) -> bool:
        """
        处理异常
        
        Args:
            exception: 异常对象
            context: 上下文信息
            
        Returns:
            bool: 是否有对应的处理函数并成功处理
        """
        error_msg = "异常发生"
        if context:
            error_msg += f" (上下文: {context})"
        error_msg += f": {exception}"
        logger.debug(error_msg)
        
        handler = self._find_handler(type(exception))
        if handler is None:
            self._handle_generic_error(exception, context)
            return False
        
        try:
            handler(exception, context)
            return True
        except Exception as e:
            logger.error(f"错误处理函数执行异常: {e}", exc_info=True)
            return False
    
    def _handle_game_error(self, exception: GameException, context: Optional[str]):
        """处理游戏逻辑错误"""
        logger.error(f"游戏逻辑错误 [阶段: {exception.game_state}]: {exception.message}")
    
    def _handle_stage_error(self, exception: InvalidStageException, context: Optional[str]):
        """处理阶段前置条件错误"""
        expected = ", ".join(exception.expected) or "-"
        logger.warning(f"当前阶段不允许该操作 [阶段: {exception.game_state}, "
                       f"需要: {expected}]: {exception.message}")
    
    def _handle_move_error(self, exception: InvalidMoveException, context: Optional[str]):
        """处理出拳错误"""
        logger.warning(f"无效出拳 [{exception.value!r}]: {exception.message}")
    
    def _handle_storage_error(self, exception: StorageException, context: Optional[str]):
        """处理存储错误"""
        logger.error(f"战绩存储错误 [路径: {exception.path}]: {exception.message}")
    
    def _handle_config_error(self, exception: ConfigurationException, context: Optional[str]):
        """处理配置错误"""
        logger.error(f"配置错误 [键: {exception.config_key}]: {exception.message}")
    
    def _handle_generic_error(self, exception: Exception, context: Optional[str]):
        """处理通用错误"""
        logger.error(f"未处理的异常: {type(exception).__name__}: {exception}")
        logger.debug(traceback.format_exc())


# 全局错误处理器实例
global_error_handler = ErrorHandler()
