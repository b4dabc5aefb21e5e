# resuid/types.py
"""
本模块定义了 resuid 系统的核心数据类型与常量。
"""

from typing import NamedTuple

INVALID_ID = -1
"""无效 UID 的唯一哨兵值。所有负数 ID 在语义上都等价于它。"""

UID_PREFIX = "uid://"
INVALID_UID_TEXT = "uid://<invalid>"

MAX_UID = 0x7FFFFFFFFFFFFFFF
"""最大的合法 UID (2^63 - 1)。"""


class CacheEntry(NamedTuple):
    """
    缓存文件中的一条记录。

    Attributes:
        uid: 64 位有符号整数 UID。
        path: 以 UTF-8 解码的资源路径。
    """

    uid: int
    path: str
