from __future__ import annotations

from typing import Any, Iterator, List

from classic_algorithms.base import Algorithm

NIL = -1
"""表示 "没有下一个节点" 的哨兵索引。"""


class LinkedList(Algorithm):
    """基于节点池（arena）的单向链表实现。

    链表是一种线性数据结构，每个节点包含数据和指向下一个节点的引用。
    这里节点不是独立的对象，而是存放在链表私有的节点池中：
    第 i 个槽位的值存储在 _values[i]，下一个节点的索引存储在 _next[i]，
    NIL 表示链表末尾。删除后空出的槽位进入空闲列表，供之后插入时复用。

    节点池只属于当前链表，外部代码无法持有节点引用，
    因此只要通过下面的操作修改链表，就不会出现环：
    从头节点沿 next 遍历最多 len(self) 步即到达 NIL。

    主要操作：
        - insert_at_head: 在链表头部插入元素
        - append: 在链表末尾添加元素
        - search: 判断链表是否包含指定值
        - delete: 删除包含指定值的第一个节点
        - reverse: 原地反转链表
        - to_list: 转换为普通列表

    时间复杂度:
        - insert_at_head: O(1)
        - append: O(n) - 需要遍历到末尾
        - search: O(n) - 可能需要遍历整个链表
        - delete: O(n) - 可能需要遍历整个链表
        - reverse: O(n)
    空间复杂度: O(n) - n 为存储元素的数量
    """

    def __init__(self) -> None:
        """初始化空链表。"""
        self._values: List[Any] = []
        self._next: List[int] = []
        self._free: List[int] = []
        self._head: int = NIL
        self._length = 0

    def _allocate(self, value: Any, next_index: int) -> int:
        """在节点池中分配一个槽位，优先复用空闲槽位。"""
        if self._free:
            index = self._free.pop()
            self._values[index] = value
            self._next[index] = next_index
        else:
            index = len(self._values)
            self._values.append(value)
            self._next.append(next_index)
        self._length += 1
        return index

    def _release(self, index: int) -> None:
        self._values[index] = None  # 释放对值的引用
        self._next[index] = NIL
        self._free.append(index)
        self._length -= 1

    def insert_at_head(self, value: Any) -> None:
        """在链表头部插入一个值。

        参数:
            value: 要插入的值

        示例:
            >>> linked_list = LinkedList()
            >>> linked_list.insert_at_head(2)
            >>> linked_list.insert_at_head(1)
            >>> linked_list.to_list()
            [1, 2]
        """
        self._head = self._allocate(value, self._head)

    def append(self, value: Any) -> None:
        """在链表末尾添加一个值。

        时间复杂度: O(n) - 需要遍历到链表末尾
        """
        new_index = self._allocate(value, NIL)
        if self._head == NIL:  # 如果链表为空，新节点成为头节点
            self._head = new_index
            return

        current = self._head
        while self._next[current] != NIL:
            current = self._next[current]
        self._next[current] = new_index

    def search(self, value: Any) -> bool:
        """判断链表中是否存在等于 value 的节点。

        示例:
            >>> linked_list = LinkedList()
            >>> linked_list.insert_at_head(1)
            >>> linked_list.search(1)
            True
            >>> linked_list.search(3)
            False
        """
        current = self._head
        while current != NIL:
            if self._values[current] == value:
                return True
            current = self._next[current]
        return False

    def delete(self, value: Any) -> bool:
        """删除包含指定值的第一个节点。

        参数:
            value: 要删除的值

        返回:
            bool: 如果成功删除返回 True，值不存在时不做任何修改并返回 False
        """
        current = self._head
        prev = NIL

        while current != NIL:
            if self._values[current] == value:
                if prev != NIL:  # 删除的不是头节点
                    self._next[prev] = self._next[current]
                else:  # 删除的是头节点
                    self._head = self._next[current]
                self._release(current)
                return True
            prev = current
            current = self._next[current]
        return False

    def reverse(self) -> None:
        """原地反转链表，只修改 next 索引，不移动值。

        示例:
            >>> linked_list = LinkedList()
            >>> for v in (3, 2, 1):
            ...     linked_list.insert_at_head(v)
            >>> linked_list.reverse()
            >>> linked_list.to_list()
            [3, 2, 1]
        """
        prev = NIL
        current = self._head
        while current != NIL:
            following = self._next[current]
            self._next[current] = prev
            prev = current
            current = following
        self._head = prev

    def is_empty(self) -> bool:
        return self._head == NIL

    def to_list(self) -> List[Any]:
        """将链表转换为普通列表（快照，不会修改链表）。"""
        return list(self)

    def __iter__(self) -> Iterator[Any]:
        current = self._head
        while current != NIL:
            yield self._values[current]
            current = self._next[current]

    def __len__(self) -> int:
        return self._length

    def execute(self, *args, **kwargs) -> List[Any]:
        """返回链表的列表表示。"""
        return self.to_list()
