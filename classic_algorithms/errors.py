"""算法库的异常类型。

按照约定区分两类输入错误：
    - InvalidTypeError: 参数类型不符合要求（例如需要字符串却传入了数字）
    - InvalidRangeError: 参数类型正确但取值不合法（例如负数的阶乘）

"未找到" 之类的结果（二分搜索未命中、两数之和无解、空栈弹出、
图中不存在路径）不是异常，而是通过 -1、[] 或 None 返回。
"""
from __future__ import annotations

from typing import Any


class AlgorithmError(Exception):
    """本库所有异常的基类。"""


class InvalidTypeError(AlgorithmError, TypeError):
    """参数的类型不符合算法要求。"""


class InvalidRangeError(AlgorithmError, ValueError):
    """参数类型正确，但取值超出了算法的定义域。"""


class VertexNotFoundError(InvalidRangeError):
    """图遍历的起点或终点不在图中。"""

    def __init__(self, vertex: Any) -> None:
        super().__init__(f"顶点 {vertex!r} 不在图中")
        self.vertex = vertex


class SupersededCallError(AlgorithmError):
    """防抖调用在触发之前被后续调用取代。"""


class AlgorithmNotFoundError(AlgorithmError, KeyError):
    """注册表中不存在指定名称的算法。"""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"未找到算法: {self.name}"
