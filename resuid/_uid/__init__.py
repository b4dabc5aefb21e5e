# resuid/_uid/__init__.py
"""
资源 UID 文本编解码模块。

本模块是 `uid://` 文本格式的唯一真理源，纯逻辑，无任何 I/O 依赖。
"""
