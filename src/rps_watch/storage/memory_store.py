"""
内存战绩存储
In-Memory Score Store
"""
from .score_store_base import ScoreStoreBase, ScoreRecord


class MemoryScoreStore(ScoreStoreBase):
    """进程内存储，进程退出后战绩丢失"""
    
    def __init__(self, matches_won: int = 0, matches_lost: int = 0):
        self._record = ScoreRecord(matches_won, matches_lost)
    
    def load(self) -> ScoreRecord:
        return ScoreRecord(self._record.matches_won, self._record.matches_lost)
    
    def save(self, record: ScoreRecord):
        self._record = ScoreRecord(record.matches_won, record.matches_lost)
    
