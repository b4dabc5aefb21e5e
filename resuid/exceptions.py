# resuid/exceptions.py
"""
本模块定义了 resuid 项目中所有自定义的、语义化的异常类型。

公开的查询接口遵循“哨兵值”约定 (-1 / 空字符串)，这些异常只在
内部的读写层抛出，并在操作边界处被捕获和记录。
"""


class ResourceUIDError(Exception):
    """
    所有 resuid 自定义异常的通用基类。
    捕获此异常可以处理所有源自本项目的预期错误。
    """
    pass


class ConfigurationError(ResourceUIDError):
    """
    表示在加载、解析或验证配置时发生的错误。
    """
    pass


class CacheFormatError(ResourceUIDError, ValueError):
    """
    表示缓存文件的二进制结构不合法。
    例如数据被截断、路径长度为负数，或路径不是合法的 UTF-8。
    继承自 ValueError 是为了与标准库解析错误的行为保持一致。
    """
    pass
