# resuid/_uid/codec.py
"""
UID 整数与 `uid://` 文本形式之间的双向转换。

文本主体是一个 33 进制数，高位在前，字母表为 `a`-`y` (0..24) 与
`0`-`8` (25..32)。
"""

from __future__ import annotations

from resuid.types import INVALID_ID, INVALID_UID_TEXT, MAX_UID, UID_PREFIX

UID_CHARACTERS = "abcdefghijklmnopqrstuvwxy012345678"
BASE = len(UID_CHARACTERS)  # 33

# 33^13 > 2^63 - 1 >= 33^12
MAX_BODY_LENGTH = 13

_LETTER_COUNT = ord("y") - ord("a") + 1


def id_to_text(uid: int) -> str:
    """
    将 UID 编码为 `uid://...` 文本。

    所有负数都被编码为同一个哨兵字符串 `uid://<invalid>`，因此该函数在
    负数区间上不是单射的。ID 0 编码为 `uid://a`。
    """
    if uid < 0:
        return INVALID_UID_TEXT

    digits: list[str] = []
    value = uid
    while True:
        value, remainder = divmod(value, BASE)
        digits.append(UID_CHARACTERS[remainder])
        if value == 0:
            break

    # 上面的循环按低位到高位生成字符
    return UID_PREFIX + "".join(reversed(digits))


def _char_value(char: str) -> int:
    if "a" <= char <= "y":
        return ord(char) - ord("a")
    if "0" <= char <= "8":
        return ord(char) - ord("0") + _LETTER_COUNT
    return -1


def text_to_id(text: str) -> int:
    """
    将 `uid://...` 文本解码为 UID。

    缺少前缀、等于哨兵字符串，或主体中出现字母表以外的字符时，返回
    `INVALID_ID`。

    注意：结果会被截断到 63 位 (`& MAX_UID`)，超长或溢出的主体不会报错，
    而是静默回绕。这是与既有缓存格式兼容所需的行为。
    """
    if not text.startswith(UID_PREFIX) or text == INVALID_UID_TEXT:
        return INVALID_ID

    uid = 0
    for char in text[len(UID_PREFIX) :]:
        value = _char_value(char)
        if value < 0:
            return INVALID_ID
        uid = uid * BASE + value

    return uid & MAX_UID


def is_valid_text(text: str) -> bool:
    """判断文本能否被解码为一个合法的 UID。"""
    return text_to_id(text) != INVALID_ID
