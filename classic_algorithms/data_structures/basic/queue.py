from collections import deque
from typing import Any, Deque, List

from classic_algorithms.base import Algorithm


class Queue(Algorithm):
    """先进先出（FIFO）队列，底层是 collections.deque。

    enqueue 写入队尾，dequeue 从队头取出，二者都是 O(1)；
    用列表的 pop(0) 实现会退化为 O(n)。
    空队列上的 dequeue 和 peek 返回 None。
    """

    def __init__(self) -> None:
        """初始化空队列。"""
        self._items: Deque[Any] = deque()

    def enqueue(self, item: Any) -> None:
        """将元素加入队尾。"""
        self._items.append(item)

    def dequeue(self) -> Any:
        """从队头移除并返回元素，队列为空时返回 None。"""
        return self._items.popleft() if self._items else None

    def peek(self) -> Any:
        """查看队头元素但不移除，队列为空时返回 None。"""
        return self._items[0] if self._items else None

    def is_empty(self) -> bool:
        return not self._items

    def size(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()

    def to_list(self) -> List[Any]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def execute(self, *args, **kwargs) -> List[Any]:
        """返回当前队列的快照。"""
        return self.to_list()
