# tests/conftest.py
"""项目全局共享的测试 Fixtures。"""

import logging
from collections.abc import Callable, Generator, Iterable
from pathlib import Path
from typing import Any

import pytest
import structlog
from pytest_mock import MockerFixture
from rich.console import Console

from resuid.cache_file import write_cache_file
from resuid.types import CacheEntry


@pytest.fixture(scope="session", autouse=True)
def disable_rich_colors_for_tests(
    session_mocker: MockerFixture,
) -> Generator[None, None, None]:
    """全局禁用 rich 库的颜色输出，以确保测试结果的确定性。"""
    original_init = Console.__init__

    def new_init(self: Console, *args: Any, **kwargs: Any) -> None:
        kwargs["force_terminal"] = False
        kwargs["color_system"] = None
        original_init(self, *args, **kwargs)

    session_mocker.patch("rich.console.Console.__init__", new=new_init)
    yield


@pytest.fixture(autouse=True)
def restore_logging_state() -> Generator[None, None, None]:
    """还原 setup_logging 对 structlog 与根 logger 的全局修改。"""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    structlog.reset_defaults()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    logging.getLogger("resuid").setLevel(logging.NOTSET)


@pytest.fixture
def sample_entries() -> list[CacheEntry]:
    """提供一组包含中文路径和最大 UID 的记录。"""
    return [
        CacheEntry(0, "res://icon.svg"),
        CacheEntry(8060368642360689600, "res://scenes/main.tscn"),
        CacheEntry(1, "res://scripts/player.gd"),
        CacheEntry(0x7FFFFFFFFFFFFFFF, "res://assets/角色/hero.png"),
        CacheEntry(4242, "res://addons/plugin.cfg"),
        CacheEntry(123456789, "res://levels/level_05.tscn"),
        CacheEntry(987654321, "res://levels/level_06.tscn"),
    ]


@pytest.fixture
def make_cache_file(tmp_path: Path) -> Callable[..., Path]:
    """返回一个把记录写入临时缓存文件的工厂函数。"""

    def _make(entries: Iterable[CacheEntry], name: str = "uid_cache.bin") -> Path:
        path = tmp_path / name
        write_cache_file(path, entries)
        return path

    return _make
