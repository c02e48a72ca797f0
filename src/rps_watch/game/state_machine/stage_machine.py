"""
比赛阶段状态机
Match Stage Machine
"""
from typing import Dict, List
from .match_stage import MatchStage
from ...utils.exceptions import InvalidStageException
from ...utils.logger import setup_logger

logger = setup_logger("RPS.StageMachine")


class StageMachine:
    """比赛阶段状态机类"""
    
    # 阶段转换规则；转回 SELECTING 包括重置
    VALID_TRANSITIONS: Dict[MatchStage, List[MatchStage]] = {
        MatchStage.SELECTING: [MatchStage.REVEALED, MatchStage.SELECTING],
        MatchStage.REVEALED: [MatchStage.SELECTING, MatchStage.MATCH_OVER],
        MatchStage.MATCH_OVER: [MatchStage.SELECTING],
    }
    
    def __init__(self, initial_stage: MatchStage = MatchStage.SELECTING):
        """
        初始化状态机
        
        Args:
            initial_stage: 初始阶段
        """
        self.current_stage = initial_stage
        
        logger.debug(f"阶段状态机初始化，初始阶段: {self.current_stage}")
    
    def require(self, *stages: MatchStage, action: str = "操作"):
        """
        断言当前处于指定阶段之一
        
        Args:
            stages: 允许的阶段
            action: 操作名称（用于错误信息）
            
        Raises:
            InvalidStageException: 当前阶段不在允许范围内
        """
        if self.current_stage in stages:
            return
        expected = tuple(str(s) for s in stages)
        logger.warning(f"{action} 只能在 {'/'.join(expected)} 阶段调用，"
                       f"当前阶段: {self.current_stage}")
        raise InvalidStageException(
            f"{action} 不能在 {self.current_stage} 阶段调用",
            game_state=str(self.current_stage),
            expected=expected
        )
    
    def transition_to(self, new_stage: MatchStage):
        """
        转换到新阶段
        
        Args:
            new_stage: 新阶段
            
        Raises:
            InvalidStageException: 转换不在规则表中
        """
        if not self.can_transition_to(new_stage):
            logger.warning(f"无效的阶段转换: {self.current_stage} -> {new_stage}")
            raise InvalidStageException(
                f"无效的阶段转换: {self.current_stage} -> {new_stage}",
                game_state=str(self.current_stage),
                expected=(str(new_stage),)
            )
        
        old_stage = self.current_stage
        self.current_stage = new_stage
        logger.debug(f"阶段转换: {old_stage} -> {new_stage}")
    
    def get_current_stage(self) -> MatchStage:
        """获取当前阶段"""
        return self.current_stage
    
    def can_transition_to(self, stage: MatchStage) -> bool:
        """检查是否可以转换到指定阶段"""
        return stage in self.VALID_TRANSITIONS.get(self.current_stage, [])
    
    def reset(self, stage: MatchStage = MatchStage.SELECTING):
        """
        重置状态机（不检查转换规则）
        
        Args:
            stage: 重置后的阶段
        """
        self.current_stage = stage
        logger.debug(f"状态机已重置到: {stage}")
