"""
ddg_zeroclick - 内部日志系统
为库内各模块提供统一格式的标准库 logger。
"""
import logging
import os

LOG_LEVEL_ENV = "DDG_ZEROCLICK_LOG_LEVEL"


def _level_from_env() -> int:
    name = os.getenv(LOG_LEVEL_ENV, "WARNING").strip().upper()
    level = logging.getLevelName(name)
    # getLevelName 对未知名称返回字符串 "Level xxx"
    return level if isinstance(level, int) else logging.WARNING


def get_logger(name: str) -> logging.Logger:
    """
    获取一个日志记录器实例。

    返回的 logger 带有一个格式化的 StreamHandler，级别由环境变量
    DDG_ZEROCLICK_LOG_LEVEL 决定（默认 WARNING）。

    Args:
        name (str): Logger 的名称，通常传入 __name__。

    Returns:
        logging.Logger: 配置好的 logger 实例。
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        # 避免重复添加 handler
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(_level_from_env())
    return logger
