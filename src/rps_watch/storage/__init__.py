"""
战绩存储模块
Score Storage Module
"""
from .score_store_base import ScoreStoreBase, ScoreRecord
from .memory_store import MemoryScoreStore
from .yaml_store import YamlScoreStore
from .store_factory import StoreFactory

__all__ = [
    'ScoreStoreBase',
    'ScoreRecord',
    'MemoryScoreStore',
    'YamlScoreStore',
    'StoreFactory'
]
