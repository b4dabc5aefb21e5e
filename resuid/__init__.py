# resuid/__init__.py
"""resuid: 与路径无关的 64 位资源 UID 的文本编解码，以及 UID 缓存文件的读取。

`uid://` 文本格式与缓存文件的二进制布局均与既有的资源流水线逐位兼容。
"""

__version__ = "1.0.0"

from ._uid.codec import id_to_text, is_valid_text, text_to_id
from .cache import ResourceUIDCache, create_cache
from .config import LoggingConfig, ResUIDConfig, load_config
from .exceptions import CacheFormatError, ConfigurationError, ResourceUIDError
from .scan import get_path_from_cache
from .types import INVALID_ID, INVALID_UID_TEXT, UID_PREFIX, CacheEntry

__all__ = [
    "__version__",
    "id_to_text",
    "text_to_id",
    "is_valid_text",
    "ResourceUIDCache",
    "create_cache",
    "get_path_from_cache",
    "ResUIDConfig",
    "LoggingConfig",
    "load_config",
    "ResourceUIDError",
    "ConfigurationError",
    "CacheFormatError",
    "CacheEntry",
    "INVALID_ID",
    "INVALID_UID_TEXT",
    "UID_PREFIX",
]
