# resuid/logging_config.py
"""
resuid 的日志配置：structlog 通过 ProcessorFormatter 桥接到标准 logging。

- console：structlog 自带的 ConsoleRenderer，异常栈由 Rich 渲染。
- json   ：每行一个 JSON 对象，时间戳为 ISO-8601 UTC。

库代码只调用 `structlog.get_logger`，输出方式由宿主应用决定。
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Literal

import structlog
from structlog.typing import Processor

if TYPE_CHECKING:
    from resuid.config import ResUIDConfig

APP_LOGGER_NAME = "resuid"


def _final_processors(log_format: str, colors: bool) -> list[Processor]:
    strip_meta = structlog.stdlib.ProcessorFormatter.remove_processors_meta
    if log_format == "json":
        return [
            strip_meta,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    # 异常信息保持为 exc_info，交给 Rich 渲染
    return [
        strip_meta,
        structlog.dev.ConsoleRenderer(
            colors=colors, exception_formatter=structlog.dev.rich_traceback
        ),
    ]


def setup_logging(
    *,
    log_level: str = "INFO",
    log_format: Literal["json", "console"] = "console",
    colors: bool = True,
) -> None:
    """
    配置全局 structlog 日志系统。

    Args:
        log_level: `resuid` logger 的最低级别。根 logger 固定为 WARNING。
        log_format: 'console' 或 'json'。
        colors: console 格式下是否输出 ANSI 颜色。
    """
    timestamper = (
        structlog.processors.TimeStamper(fmt="iso", utc=True)
        if log_format == "json"
        else structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=False)
    )
    shared: list[Processor] = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        timestamper,
    ]

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            *shared,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=_final_processors(log_format, colors),
            foreign_pre_chain=shared,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(APP_LOGGER_NAME).setLevel(log_level.upper())

    structlog.get_logger("resuid.logging_config").info(
        "日志系统已配置完成。", log_format=log_format, app_log_level=log_level.upper()
    )


def setup_logging_from_config(config: ResUIDConfig, *, colors: bool = True) -> None:
    """根据 `ResUIDConfig.logging` 初始化日志系统。"""
    setup_logging(
        log_level=config.logging.level, log_format=config.logging.format, colors=colors
    )
