# resuid/cache_file.py
"""
UID 缓存文件的二进制格式读写。

布局 (全部为小端序)::

    uint32   entry_count
    重复 entry_count 次:
        int64    uid
        int32    path_byte_length (>= 0)
        bytes    UTF-8 路径文本

没有魔数、版本号或校验和。任何结构性错误都以 `CacheFormatError` 抛出，
由上层调用者决定如何处理。
"""

from __future__ import annotations

import os
import struct
from collections.abc import Iterable, Iterator
from typing import BinaryIO, Optional, Union

from resuid.exceptions import CacheFormatError
from resuid.types import CacheEntry

PathLike = Union[str, os.PathLike[str]]

_ENTRY_COUNT = struct.Struct("<I")
_RECORD_HEADER = struct.Struct("<qi")


def _remaining_bytes(stream: BinaryIO) -> Optional[int]:
    if not stream.seekable():
        return None
    position = stream.tell()
    end = stream.seek(0, os.SEEK_END)
    stream.seek(position)
    return end - position


def _read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    # 先与剩余字节数比较，避免损坏的长度字段触发超大内存分配
    remaining = _remaining_bytes(stream)
    if remaining is not None and size > remaining:
        raise CacheFormatError(
            f"缓存文件被截断: 读取 {what} 需要 {size} 字节，实际只有 {remaining} 字节"
        )
    data = stream.read(size)
    if len(data) != size:
        raise CacheFormatError(
            f"缓存文件被截断: 读取 {what} 需要 {size} 字节，实际只有 {len(data)} 字节"
        )
    return data


def read_entry_count(stream: BinaryIO) -> int:
    """读取文件头部的记录数量。"""
    (count,) = _ENTRY_COUNT.unpack(_read_exact(stream, _ENTRY_COUNT.size, "entry_count"))
    return count


def iter_raw_records(stream: BinaryIO) -> Iterator[tuple[int, bytes]]:
    """
    按文件顺序逐条产出 `(uid, 原始路径字节)`，不做 UTF-8 解码。

    这是一个惰性生成器：调用者可以在找到目标后随时停止迭代，
    而不必读取剩余的记录。
    """
    count = read_entry_count(stream)
    for index in range(count):
        uid, length = _RECORD_HEADER.unpack(
            _read_exact(stream, _RECORD_HEADER.size, f"第 {index} 条记录头")
        )
        if length < 0:
            raise CacheFormatError(f"第 {index} 条记录的路径长度为负数: {length}")
        yield uid, _read_exact(stream, length, f"第 {index} 条记录的路径")


def decode_path(raw: bytes) -> str:
    """严格按 UTF-8 解码路径字节。"""
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise CacheFormatError(f"路径不是合法的 UTF-8: {e}") from e


def iter_cache_entries(stream: BinaryIO) -> Iterator[CacheEntry]:
    """按文件顺序逐条产出已解码的 `CacheEntry`。"""
    for uid, raw in iter_raw_records(stream):
        yield CacheEntry(uid, decode_path(raw))


def read_cache_file(file_path: PathLike) -> list[CacheEntry]:
    """一次性读取整个缓存文件。文件不存在时抛出 `FileNotFoundError`。"""
    with open(file_path, "rb") as stream:
        return list(iter_cache_entries(stream))


def write_cache_file(file_path: PathLike, entries: Iterable[CacheEntry]) -> None:
    """
    将记录按给定顺序写入缓存文件，覆盖已有文件。

    Raises:
        CacheFormatError: 当 UID 超出 int64 范围或记录数超出 uint32 范围时。
    """
    records = list(entries)
    chunks = [_pack(_ENTRY_COUNT, len(records))]
    for entry in records:
        raw = _encode_path(entry.path)
        chunks.append(_pack(_RECORD_HEADER, entry.uid, len(raw)))
        chunks.append(raw)

    with open(file_path, "wb") as stream:
        stream.write(b"".join(chunks))


def _encode_path(path: str) -> bytes:
    try:
        return path.encode("utf-8")
    except UnicodeEncodeError as e:
        raise CacheFormatError(f"路径无法编码为 UTF-8: {e}") from e


def _pack(fmt: struct.Struct, *values: int) -> bytes:
    try:
        return fmt.pack(*values)
    except struct.error as e:
        raise CacheFormatError(f"无法编码记录 {values}: {e}") from e
