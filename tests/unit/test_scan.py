# tests/unit/test_scan.py
"""针对 `resuid.scan` 模块的单元测试。"""

import struct
from collections.abc import Callable
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from resuid._uid.codec import id_to_text
from resuid.scan import get_path_from_cache
from resuid.types import CacheEntry


def test_finds_record_without_full_load(
    make_cache_file: Callable[..., Path], sample_entries: list[CacheEntry]
) -> None:
    """第 5 条记录可以被直接扫描到，无需先加载整个缓存。"""
    path = make_cache_file(sample_entries)
    target = sample_entries[5]
    assert get_path_from_cache(path, id_to_text(target.uid)) == target.path


def test_finds_first_and_last_records(
    make_cache_file: Callable[..., Path], sample_entries: list[CacheEntry]
) -> None:
    path = make_cache_file(sample_entries)
    assert get_path_from_cache(path, "uid://a") == "res://icon.svg"
    assert get_path_from_cache(path, id_to_text(987654321)) == "res://levels/level_06.tscn"


def test_first_match_wins(make_cache_file: Callable[..., Path]) -> None:
    path = make_cache_file([CacheEntry(1, "res://first.png"), CacheEntry(1, "res://second.png")])
    assert get_path_from_cache(path, "uid://b") == "res://first.png"


def test_missing_uid_returns_empty(
    make_cache_file: Callable[..., Path], sample_entries: list[CacheEntry]
) -> None:
    path = make_cache_file(sample_entries)
    assert get_path_from_cache(path, "uid://c") == ""


def test_missing_file_returns_empty(tmp_path: Path) -> None:
    assert get_path_from_cache(tmp_path / "missing.bin", "uid://b") == ""


def test_invalid_text_does_not_open_file(
    tmp_path: Path, mocker: MockerFixture
) -> None:
    mocked_open = mocker.patch("resuid.scan.open", create=True)
    for text in ("uid://<invalid>", "b", "uid://z"):
        assert get_path_from_cache(tmp_path / "uid_cache.bin", text) == ""
    mocked_open.assert_not_called()


def test_stops_scanning_at_match(tmp_path: Path) -> None:
    """匹配之后的损坏数据不会被读取。"""
    path = tmp_path / "partial.bin"
    path.write_bytes(struct.pack("<Iqi", 5, 1, 1) + b"a" + struct.pack("<qi", 2, -1))
    assert get_path_from_cache(path, "uid://b") == "a"


def test_corruption_before_match_returns_empty(tmp_path: Path) -> None:
    path = tmp_path / "corrupt.bin"
    path.write_bytes(struct.pack("<Iqi", 2, 1, -1))
    assert get_path_from_cache(path, "uid://c") == ""


def test_non_matching_invalid_utf8_is_skipped(tmp_path: Path) -> None:
    path = tmp_path / "mixed.bin"
    path.write_bytes(
        struct.pack("<Iqi", 2, 1, 2) + b"\xff\xfe" + struct.pack("<qi", 2, 1) + b"z"
    )
    assert get_path_from_cache(path, "uid://c") == "z"
    assert get_path_from_cache(path, "uid://b") == ""


@pytest.mark.parametrize("bad_path", ["bad\x00path.bin", "bad\ud800path.bin"])
def test_unopenable_path_returns_empty(bad_path: str) -> None:
    assert get_path_from_cache(bad_path, "uid://b") == ""


def test_oversized_length_returns_empty(tmp_path: Path) -> None:
    path = tmp_path / "oversized.bin"
    path.write_bytes(struct.pack("<Iqi", 1, 1, 2**31 - 1) + b"abc")
    assert get_path_from_cache(path, "uid://b") == ""
