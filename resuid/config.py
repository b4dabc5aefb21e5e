# resuid/config.py
"""
resuid 的配置模型。

所有字段均可通过 `RESUID_` 前缀的环境变量或 `.env` 文件覆盖，
嵌套字段使用双下划线，例如 `RESUID_LOGGING__FORMAT=json`。
"""

from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from resuid.exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: Literal["json", "console"] = "console"

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"无效的日志级别 '{v}'，可选值: {', '.join(LOG_LEVELS)}")
        return level


class ResUIDConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="RESUID_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    cache_path: Optional[Path] = Field(
        default=None, description="启动时加载的 UID 缓存文件路径；为空则不加载"
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(**overrides: Any) -> ResUIDConfig:
    """
    构造 `ResUIDConfig`，将 pydantic 的校验错误转换为 `ConfigurationError`。
    """
    try:
        return ResUIDConfig(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"配置校验失败: {e}") from e
