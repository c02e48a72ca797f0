"""
战绩存储工厂
Score Store Factory
"""
from typing import Dict, Any, Optional
from .score_store_base import ScoreStoreBase
from .memory_store import MemoryScoreStore
from .yaml_store import YamlScoreStore
from ..utils.exceptions import ConfigurationException
from ..utils.logger import setup_logger

logger = setup_logger("RPS.StoreFactory")


class StoreFactory:
    """战绩存储工厂类，负责按配置创建存储实例"""
    
    _store_classes: Dict[str, type] = {}
    
    @classmethod
    def register_store(cls, name: str, store_class: type):
        """
        注册存储类
        
        Args:
            name: 存储类型名称（如 'yaml'）
            store_class: 存储类（必须继承自ScoreStoreBase）
        """
        if not issubclass(store_class, ScoreStoreBase):
            raise TypeError(f"{store_class} must be a subclass of ScoreStoreBase")
        cls._store_classes[name.lower()] = store_class
    
    @classmethod
    def create_store(cls, name: str, config: Optional[Dict[str, Any]] = None) -> ScoreStoreBase:
        """
        创建存储实例
        
        Args:
            name: 存储类型名称
            config: 构造参数
            
        Returns:
            ScoreStoreBase: 存储实例
            
        Raises:
            ConfigurationException: 未知类型或参数错误
        """
        name_lower = str(name).lower()
        if name_lower not in cls._store_classes:
            raise ConfigurationException(f"未知的存储类型: {name}", config_key="storage.type")
        
        store_class = cls._store_classes[name_lower]
        try:
            store = store_class(**(config or {}))
        except TypeError as e:
            raise ConfigurationException(f"存储参数错误: {e}", config_key="storage") from e
        
        logger.info(f"创建战绩存储: {name_lower}")
        return store
    
    @classmethod
    def create_from_config(cls, storage_config: Dict[str, Any]) -> ScoreStoreBase:
        """
        根据配置字典创建存储实例
        
        Args:
            storage_config: 存储配置（type 键为类型，其余为构造参数）
        """
        store_type = storage_config.get('type', 'memory')
        params = {k: v for k, v in storage_config.items() if k != 'type'}
        return cls.create_store(store_type, params)
    
    @classmethod
    def get_available_stores(cls) -> list:
        """获取已注册的存储类型"""
        return sorted(cls._store_classes)


StoreFactory.register_store('memory', MemoryScoreStore)
StoreFactory.register_store('yaml', YamlScoreStore)
