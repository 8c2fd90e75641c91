"""
统一日志系统配置模块
提供全局的日志配置和获取接口
"""

import logging
import os
import sys
from typing import Optional


# 日志级别映射
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# 默认日志格式
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
# 简化格式（用于命令行与批处理）
SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

# 环境变量名
ENV_LOG_LEVEL = "CN_NUMERAL_LOG_LEVEL"
ENV_LOG_FILE = "CN_NUMERAL_LOG_FILE"
ENV_LOG_FORMAT = "CN_NUMERAL_LOG_FORMAT"

# 本库所有日志器的公共前缀
ROOT_LOGGER_NAME = "cn_numeral"

_configured = False


def setup_logging(
    level: str = None,
    log_file: Optional[str] = None,
    format_string: str = DEFAULT_FORMAT,
    console_output: bool = True,
):
    """
    配置库日志系统

    只配置 ``cn_numeral`` 命名空间下的日志器，不改动宿主程序的根日志器。

    Args:
        level: 日志级别，可选值: DEBUG, INFO, WARNING, ERROR, CRITICAL
               如果为None，从环境变量CN_NUMERAL_LOG_LEVEL读取，默认为WARNING
        log_file: 日志文件路径，如果提供则同时输出到文件
        format_string: 日志格式字符串
        console_output: 是否输出到控制台
    """
    global _configured

    if _configured:
        return

    if level is None:
        level = os.environ.get(ENV_LOG_LEVEL, "WARNING")

    log_level = LOG_LEVELS.get(level.upper(), logging.WARNING)

    lib_logger = logging.getLogger(ROOT_LOGGER_NAME)
    lib_logger.setLevel(log_level)
    lib_logger.handlers.clear()

    formatter = logging.Formatter(format_string)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        lib_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        lib_logger.addHandler(file_handler)

    # 已有自己的处理器，避免重复输出到根日志器
    lib_logger.propagate = not lib_logger.handlers

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    获取指定名称的日志器

    Args:
        name: 日志器名称，通常使用 __name__

    Returns:
        logging.Logger: 配置好的日志器实例
    """
    if not _configured:
        auto_setup()

    return logging.getLogger(name)


def reset_logging():
    """撤销 setup_logging 的配置，下次 get_logger 时重新读取环境变量"""
    global _configured

    lib_logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(lib_logger.handlers):
        lib_logger.removeHandler(handler)
        handler.close()
    lib_logger.propagate = True
    lib_logger.setLevel(logging.NOTSET)
    _configured = False


# 便捷函数：根据环境变量自动配置
def auto_setup():
    """
    根据环境变量自动配置日志系统

    环境变量:
        CN_NUMERAL_LOG_LEVEL: 日志级别 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        CN_NUMERAL_LOG_FILE: 日志文件路径
        CN_NUMERAL_LOG_FORMAT: 日志格式 (default, simple)
    """
    log_level = os.environ.get(ENV_LOG_LEVEL, "WARNING")
    log_file = os.environ.get(ENV_LOG_FILE, None)
    log_format = os.environ.get(ENV_LOG_FORMAT, "default")

    format_string = SIMPLE_FORMAT if log_format == "simple" else DEFAULT_FORMAT

    setup_logging(level=log_level, log_file=log_file, format_string=format_string)
