"""算法的通用数据结构和辅助函数。

本模块提供了算法实现中常用的工具：
元素交换函数、入口参数校验函数，以及基于邻接表的图数据结构。
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Dict, Iterable, List, Union

from .errors import InvalidRangeError, InvalidTypeError, VertexNotFoundError


def swap(items: List[Any], i: int, j: int) -> None:
    """在列表中原地交换两个元素的位置。

    参数:
        items: 要操作的列表
        i: 第一个元素的索引
        j: 第二个元素的索引

    示例:
        >>> arr = [1, 2, 3]
        >>> swap(arr, 0, 2)
        >>> print(arr)  # [3, 2, 1]
    """
    items[i], items[j] = items[j], items[i]


def is_integer(value: Any) -> bool:
    """判断是否为整数。bool 虽然是 int 的子类，但不算整数。"""
    return isinstance(value, int) and not isinstance(value, bool)


def ensure_str(value: Any, name: str = "s") -> str:
    if not isinstance(value, str):
        raise InvalidTypeError(f"参数 {name} 必须是字符串，得到: {type(value).__name__}")
    return value


def ensure_int(value: Any, name: str = "n") -> int:
    if not is_integer(value):
        raise InvalidTypeError(f"参数 {name} 必须是整数，得到: {type(value).__name__}")
    return value


def ensure_non_negative_int(value: Any, name: str = "n") -> int:
    ensure_int(value, name)
    if value < 0:
        raise InvalidRangeError(f"参数 {name} 不能为负数，得到: {value}")
    return value


def ensure_sequence(value: Any, name: str = "data") -> Sequence:
    """校验参数是否为序列。

    字符串和字节串虽然也是序列，但在这里不被当作数值序列接受。
    """
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        raise InvalidTypeError(f"参数 {name} 必须是列表或元组，得到: {type(value).__name__}")
    return value


class Graph:
    """使用邻接表实现的简单图。

    使用字典存储邻接表，邻居列表保持插入顺序，遍历算法按此顺序访问邻居。
    通过 add_edge 添加的是无向边；通过 from_adjacency 可以直接载入
    任意（包括有向的）邻接表。

    邻接表中引用了但本身不是键的顶点称为悬空引用，
    neighbors 会把它们当作不存在而跳过。

    属性:
        adjacency: 存储图的邻接表，键为节点，值为邻居节点列表
    """

    def __init__(self) -> None:
        """初始化空图。"""
        self.adjacency: Dict[Any, List[Any]] = {}

    @classmethod
    def from_adjacency(cls, adjacency: Mapping[Any, Iterable[Any]]) -> "Graph":
        """从邻接表映射构造图，保留键和邻居的原有顺序。

        参数:
            adjacency: 顶点到邻居序列的映射

        示例:
            >>> graph = Graph.from_adjacency({'A': ['B'], 'B': []})
            >>> graph.neighbors('A')
            ['B']
        """
        if not isinstance(adjacency, Mapping):
            raise InvalidTypeError(f"图必须是邻接表映射，得到: {type(adjacency).__name__}")
        graph = cls()
        for node, neighbors in adjacency.items():
            if isinstance(neighbors, (str, bytes)) or not isinstance(neighbors, Iterable):
                raise InvalidTypeError(f"顶点 {node!r} 的邻居必须是序列")
            graph.adjacency[node] = list(neighbors)
        return graph

    def add_vertex(self, node: Any) -> None:
        """添加一个孤立顶点；已存在时不做任何修改。"""
        self.adjacency.setdefault(node, [])

    def add_edge(self, u: Any, v: Any) -> None:
        """在节点 u 和 v 之间添加一条无向边。

        由于是无向图，会在两个节点的邻接表中都添加对方。

        参数:
            u: 第一个节点
            v: 第二个节点

        示例:
            >>> graph = Graph()
            >>> graph.add_edge('A', 'B')
            >>> print(graph.neighbors('A'))  # ['B']
        """
        self.adjacency.setdefault(u, []).append(v)
        self.adjacency.setdefault(v, []).append(u)

    def neighbors(self, node: Any) -> List[Any]:
        """返回指定节点的所有邻居节点。

        参数:
            node: 要查询邻居的节点

        返回:
            List[Any]: 邻居节点列表（跳过悬空引用），如果节点不存在则返回空列表
        """
        return [n for n in self.adjacency.get(node, []) if n in self.adjacency]

    def require(self, node: Any) -> None:
        """节点不在图中时抛出 VertexNotFoundError。"""
        if node not in self.adjacency:
            raise VertexNotFoundError(node)

    def __contains__(self, node: Any) -> bool:
        return node in self.adjacency

    def __len__(self) -> int:
        return len(self.adjacency)


GraphLike = Union[Graph, Mapping[Any, Iterable[Any]]]


def as_graph(graph: GraphLike) -> Graph:
    """把 Graph 或邻接表映射统一转换为 Graph。"""
    if isinstance(graph, Graph):
        return graph
    return Graph.from_adjacency(graph)
