from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List

from classic_algorithms.base import Algorithm


@dataclass
class Stack(Algorithm):
    """后进先出（LIFO）栈，底层是 Python 列表，列表末尾即栈顶。

    push / pop / peek 均为 O(1)（push 为均摊）。
    空栈上的 pop 和 peek 返回 None，不抛异常；调用方需要区分
    “栈空”和“栈顶就是 None”时先检查 is_empty()。
    """

    _items: List[Any]

    def __init__(self) -> None:
        """初始化空栈。"""
        self._items = []

    def push(self, item: Any) -> None:
        """将元素压入栈顶。"""
        self._items.append(item)

    def pop(self) -> Any:
        """弹出并返回栈顶元素。

        示例:
            >>> stack = Stack()
            >>> stack.push("a"); stack.push("b")
            >>> stack.pop()
            'b'
        """
        return self._items.pop() if self._items else None

    def peek(self) -> Any:
        """查看栈顶元素但不移除，栈为空时返回 None。"""
        return self._items[-1] if self._items else None

    def is_empty(self) -> bool:
        return not self._items

    def size(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()

    def to_list(self) -> List[Any]:
        """返回从栈底到栈顶的元素副本，不修改栈。"""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def execute(self, *args, **kwargs) -> List[Any]:
        """返回当前栈的快照。"""
        return self.to_list()
