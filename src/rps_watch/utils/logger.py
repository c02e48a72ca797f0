"""
日志工具模块
Logger Utility Module
"""
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Dict, Any


def get_log_level(level_str: str) -> int:
    """
    从字符串获取日志级别
    
    Args:
        level_str: 日志级别字符串（DEBUG, INFO, WARNING, ERROR, CRITICAL）
        
    Returns:
        int: 日志级别，无法识别时返回INFO
    """
    level_map = {
        'DEBUG': logging.DEBUG,
        'INFO': logging.INFO,
        'WARNING': logging.WARNING,
        'ERROR': logging.ERROR,
        'CRITICAL': logging.CRITICAL
    }
    return level_map.get(str(level_str).upper(), logging.INFO)


def setup_logger(
    name: str = "RPS",
    log_file: Optional[str] = None,
    level: int = logging.INFO,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    设置日志记录器
    
    同名记录器重复调用时不会重复添加控制台处理器，只更新级别并补充文件处理器。
    
    Args:
        name: 日志记录器名称
        log_file: 日志文件路径（可选）
        level: 日志级别
        format_string: 日志格式字符串（可选）
        
    Returns:
        logging.Logger: 配置好的日志记录器
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    # 每个记录器自带处理器，避免经父记录器重复输出
    logger.propagate = False
    
    if format_string is None:
        format_string = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    
    formatter = logging.Formatter(format_string)
    
    # 控制台处理器
    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)
    
    # 文件处理器（如果指定）
    if log_file:
        log_path = Path(log_file)
        known_files = {h.baseFilename for h in logger.handlers
                       if isinstance(h, logging.FileHandler)}
        if os.path.abspath(log_file) not in known_files:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
    
    for handler in logger.handlers:
        handler.setLevel(level)
    
    return logger


def setup_logger_from_config(config: Dict[str, Any], name: str = "RPS") -> logging.Logger:
    """
    从配置字典设置日志记录器
    
    Args:
        config: 配置字典（包含level和file键）
        name: 日志记录器名称
        
    Returns:
        logging.Logger: 配置好的日志记录器
    """
    level = get_log_level(config.get('level', 'INFO'))
    log_file = config.get('file')
    
    return setup_logger(name=name, log_file=log_file, level=level)


def configure_logging(config: Dict[str, Any], prefix: str = "RPS"):
    """
    把日志配置应用到所有已创建的 RPS.* 记录器
    
    Args:
        config: 日志配置字典（包含level和file键）
        prefix: 记录器名称前缀
    """
    names = [name for name in logging.root.manager.loggerDict
             if name == prefix or name.startswith(prefix + ".")]
    for name in names:
        setup_logger_from_config(config, name)
