import sys

from loguru import logger

from acsearch.core.config import Settings, settings as default_settings


# ========================================
# Loguru 日志配置
# ========================================
def setup_logger(settings: Settings = default_settings) -> None:
    """配置 loguru 日志系统"""
    # 移除默认的 handler
    logger.remove()

    level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL

    # stdout 留给命令行输出，日志写 stderr
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level,
        colorize=True,
    )

    # 如果配置了日志文件，添加文件输出
    if settings.LOG_FILE:
        logger.add(
            settings.LOG_FILE,
            rotation="100 MB",  # 日志文件达到 100MB 时轮转
            retention="10 days",  # 保留最近 10 天的日志
            compression="zip",  # 压缩旧日志
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level=level,
        )

    logger.debug("Loguru 日志系统初始化完成")
