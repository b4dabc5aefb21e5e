# resuid/scan.py
"""无需构建完整映射、直接扫描缓存文件的一次性 UID 查询。"""

from __future__ import annotations

import structlog

from resuid._uid.codec import text_to_id
from resuid.cache_file import PathLike, decode_path, iter_raw_records
from resuid.types import INVALID_ID

logger = structlog.get_logger(__name__)


def get_path_from_cache(file_path: PathLike, uid_text: str) -> str:
    """
    在缓存文件中查找 UID 文本对应的路径，不加载整个缓存。

    记录按顺序扫描，命中第一条匹配记录即停止；未命中记录的路径不会被解码。
    UID 文本无效时直接返回空字符串，不会打开文件。

    Returns:
        对应的路径。文件不存在、格式错误或没有匹配记录时均返回空字符串，
        调用者无法区分这三种情况。
    """
    uid = text_to_id(uid_text)
    if uid == INVALID_ID:
        return ""

    try:
        with open(file_path, "rb") as stream:
            for record_uid, raw in iter_raw_records(stream):
                if record_uid == uid:
                    return decode_path(raw)
    # CacheFormatError 与含 NUL 等非法字符的文件路径都属于 ValueError
    except (OSError, ValueError) as e:
        logger.debug(
            "扫描 UID 缓存文件失败。",
            file_path=str(file_path),
            uid=uid_text,
            reason=str(e),
        )
        return ""

    logger.debug("UID 未在缓存文件中找到。", file_path=str(file_path), uid=uid_text)
    return ""
