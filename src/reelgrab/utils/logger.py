from __future__ import annotations

import os
import sys
import tempfile

from loguru import logger

from .paths import log_dir

# 1. 日志目录：开发环境为项目根目录下的 logs，打包后为 Documents/ReelGrab/logs
LOG_DIR = str(log_dir())

if not os.path.exists(LOG_DIR):
    try:
        os.makedirs(LOG_DIR)
    except Exception:
        # 无权限创建目录时降级为临时目录
        LOG_DIR = os.path.join(tempfile.gettempdir(), "ReelGrab_logs")
        os.makedirs(LOG_DIR, exist_ok=True)


# 2. 重置 logger 配置
logger.remove()


# 3. 控制台输出
_console_sink = getattr(sys, "__stderr__", None) or sys.stderr
if _console_sink is not None:
    logger.add(
        _console_sink,
        level="INFO",
        format=(
            "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
        ),
    )


# 4. 文件输出：每天午夜轮转，保留 7 天，旧日志压缩
logger.add(
    os.path.join(LOG_DIR, "app_{time:YYYY-MM-DD}.log"),
    level="DEBUG",
    rotation="00:00",
    retention="7 days",
    compression="zip",
    encoding="utf-8",
    enqueue=True,
    backtrace=True,
    diagnose=True,
)


# 5. 全局异常钩子
def handle_exception(exc_type, exc_value, exc_traceback):
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return
    logger.opt(exception=(exc_type, exc_value, exc_traceback)).critical("Uncaught exception")


sys.excepthook = handle_exception