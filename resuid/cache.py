# resuid/cache.py
"""
本模块提供 UID ⇄ 路径的内存缓存，数据来自二进制缓存文件。

缓存对象是普通的实例状态，由调用者创建并传递，不是全局单例。
它不做任何加锁：在其他线程查询的同时重新加载，需要调用者自行同步。
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Union

import structlog

from resuid._uid.codec import id_to_text, text_to_id
from resuid.cache_file import PathLike, iter_cache_entries, write_cache_file
from resuid.types import INVALID_ID, UID_PREFIX, CacheEntry

if TYPE_CHECKING:
    from resuid.config import ResUIDConfig

logger = structlog.get_logger(__name__)


class ResourceUIDCache:
    """一个从缓存文件加载、支持双向查询的 UID 注册表。"""

    def __init__(self) -> None:
        self._unique_ids: dict[int, str] = {}
        self._reverse_cache: dict[str, int] = {}

    @classmethod
    def from_config(cls, config: ResUIDConfig) -> ResourceUIDCache:
        """创建缓存，并在配置了 `cache_path` 时立即加载它。"""
        cache = cls()
        if config.cache_path is not None:
            cache.load_from_cache(config.cache_path)
        return cache

    def load_from_cache(self, file_path: PathLike) -> bool:
        """
        从缓存文件加载所有记录。

        记录严格按文件顺序插入，同一个 UID 或路径出现多次时，后出现的覆盖
        先出现的。加载不会先清空已有内容。

        Returns:
            成功返回 True。文件不存在或格式错误时返回 False，此时失败点
            之前的记录已经插入，调用者不应依赖缓存内容。
        """
        loaded = 0
        try:
            with open(file_path, "rb") as stream:
                for entry in iter_cache_entries(stream):
                    self._unique_ids[entry.uid] = entry.path
                    self._reverse_cache[entry.path] = entry.uid
                    loaded += 1
        # CacheFormatError 与含 NUL 等非法字符的文件路径都属于 ValueError
        except (OSError, ValueError) as e:
            logger.warning(
                "加载 UID 缓存文件失败。",
                file_path=str(file_path),
                loaded_before_failure=loaded,
                reason=str(e),
            )
            return False

        logger.debug("UID 缓存文件已加载。", file_path=str(file_path), entries=loaded)
        return True

    def save_to_cache(self, file_path: PathLike) -> bool:
        """将当前的 ID→路径 映射写入缓存文件。失败时记录日志并返回 False。"""
        try:
            write_cache_file(file_path, self.entries())
        except (OSError, ValueError) as e:
            logger.warning(
                "写入 UID 缓存文件失败。", file_path=str(file_path), reason=str(e)
            )
            return False
        return True

    def clear(self) -> None:
        self._unique_ids.clear()
        self._reverse_cache.clear()

    def get_id_path(self, uid: int) -> str:
        """按 ID 查询路径，未找到或 ID 无效时返回空字符串。"""
        if uid == INVALID_ID:
            return ""
        return self._unique_ids.get(uid, "")

    def get_path_id(self, path: str) -> int:
        """按路径查询 ID，未找到时返回 `INVALID_ID`。"""
        return self._reverse_cache.get(path, INVALID_ID)

    def has_id(self, uid: int) -> bool:
        return uid in self._unique_ids

    def uid_to_path(self, uid_text: str) -> str:
        """将 `uid://` 文本解析为路径，无法解析时返回空字符串。"""
        uid = text_to_id(uid_text)
        if uid == INVALID_ID:
            return ""
        return self.get_id_path(uid)

    def path_to_uid(self, path: str) -> str:
        """返回路径对应的 `uid://` 文本；路径未知时原样返回路径。"""
        uid = self.get_path_id(path)
        if uid == INVALID_ID:
            return path
        return id_to_text(uid)

    def ensure_path(self, path_or_uid: str) -> str:
        """
        确保返回一个路径。

        不以 `uid://` 开头的字符串原样返回；否则按 UID 文本解析。
        """
        if path_or_uid.startswith(UID_PREFIX):
            return self.uid_to_path(path_or_uid)
        return path_or_uid

    def get_id_count(self) -> int:
        return len(self._unique_ids)

    def entries(self) -> Iterator[CacheEntry]:
        """按插入顺序遍历 ID→路径 映射中的所有记录。"""
        for uid, path in self._unique_ids.items():
            yield CacheEntry(uid, path)

    def __len__(self) -> int:
        return self.get_id_count()

    def __contains__(self, key: Union[int, str]) -> bool:
        if isinstance(key, int):
            return self.has_id(key)
        if key.startswith(UID_PREFIX):
            uid = text_to_id(key)
            return uid != INVALID_ID and self.has_id(uid)
        return key in self._reverse_cache

    def __repr__(self) -> str:
        return f"ResourceUIDCache({len(self)} entries)"


def create_cache(config: ResUIDConfig) -> ResourceUIDCache:
    """根据配置创建并加载缓存的工厂函数。"""
    return ResourceUIDCache.from_config(config)
