"""
战绩存储抽象基类
Score Store Base Class
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class ScoreRecord:
    """累计战绩（跨比赛保存的两个计数器）"""
    matches_won: int = 0
    matches_lost: int = 0
    
    @property
    def total_matches(self) -> int:
        return self.matches_won + self.matches_lost
    
    def get_win_rate(self) -> float:
        """
        获取玩家胜率
        
        Returns:
            float: 胜率（0.0-1.0），没有比赛时为0.0
        """
        if self.total_matches == 0:
            return 0.0
        return self.matches_won / self.total_matches
    
    def to_dict(self) -> dict:
        """转换为字典"""
        return {
            'matches_won': self.matches_won,
            'matches_lost': self.matches_lost
        }


class ScoreStoreBase(ABC):
    """战绩存储抽象基类，定义所有存储后端必须实现的接口"""
    
    @abstractmethod
    def load(self) -> ScoreRecord:
        """
        读取累计战绩
        
        Returns:
            ScoreRecord: 累计战绩，没有数据时两个计数器均为0
        """
        pass
    
    @abstractmethod
    def save(self, record: ScoreRecord):
        """
        保存累计战绩
        
        Args:
            record: 累计战绩
        """
        pass
