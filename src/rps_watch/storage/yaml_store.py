"""
YAML文件战绩存储
YAML File Score Store
"""
import yaml
from pathlib import Path
from .score_store_base import ScoreStoreBase, ScoreRecord
from ..utils.exceptions import StorageException
from ..utils.logger import setup_logger

logger = setup_logger("RPS.YamlScoreStore")

COUNTER_KEYS = ('matches_won', 'matches_lost')


class YamlScoreStore(ScoreStoreBase):
    """
    把两个累计计数器保存为YAML映射::
    
        matches_won: 3
        matches_lost: 1
    """
    
    def __init__(self, path: str = "data/scores.yaml"):
        """
        初始化YAML存储
        
        Args:
            path: 战绩文件路径
        """
        self.path = Path(path)
    
    def load(self) -> ScoreRecord:
        """
        读取累计战绩
        
        Returns:
            ScoreRecord: 文件不存在或为空时返回全零战绩
            
        Raises:
            StorageException: 文件无法读取或内容无效
        """
        if not self.path.exists():
            logger.info(f"战绩文件不存在，使用默认值: {self.path}")
            return ScoreRecord()
        
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise StorageException(f"战绩文件解析失败: {e}", path=str(self.path)) from e
        except OSError as e:
            raise StorageException(f"战绩文件读取失败: {e}", path=str(self.path)) from e
        
        if data is None:
            logger.warning(f"战绩文件为空: {self.path}")
            return ScoreRecord()
        
        if not isinstance(data, dict):
            raise StorageException("战绩文件顶层必须是映射", path=str(self.path))
        
        values = {key: self._read_counter(data, key) for key in COUNTER_KEYS}
        record = ScoreRecord(**values)
        logger.info(f"读取战绩: 胜 {record.matches_won}, 负 {record.matches_lost}")
        return record
    
    def _read_counter(self, data: dict, key: str) -> int:
        value = data.get(key, 0)
        # bool 是 int 的子类
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise StorageException(f"计数器 {key} 必须是非负整数: {value!r}",
                                   path=str(self.path))
        return value
    
    def save(self, record: ScoreRecord):
        """
        保存累计战绩
        
        Raises:
            StorageException: 文件无法写入
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                yaml.safe_dump(record.to_dict(), f, default_flow_style=False,
                               sort_keys=False)
        except OSError as e:
            raise StorageException(f"战绩文件写入失败: {e}", path=str(self.path)) from e
        
        logger.info(f"保存战绩: 胜 {record.matches_won}, 负 {record.matches_lost}")
