"""日志输出配置"""
import sys

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logging(level="INFO", log_dir="logs"):
    """配置控制台和按天切分的文件日志, 由应用入口调用, SDK本身不会调用"""
    logger.remove()  # 清除默认的控制台输出
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=level)
    if log_dir:
        logger.add(
            f"{log_dir}/wechat_sdk_{{time:YYYY-MM-DD}}.log",
            rotation="00:00",
            retention="30 days",
            format=FILE_FORMAT,
            level=level,
            encoding="utf-8",
        )
    return logger
