"""Depth-first search algorithm."""
from ...errors import InvalidRangeError
from ...template import ValidatedAlgorithm
from ...utils import Graph, GraphLike, as_graph
from typing import Any, List, Set


class DepthFirstSearch(ValidatedAlgorithm):
    """深度优先搜索算法的递归实现。

    深度优先搜索（DFS）是一种图遍历算法，它尽可能深地搜索图的分支。
    算法从起始节点开始，沿着一条路径一直走到底，然后回溯到上一个节点，
    继续探索其他未访问的路径。

    访问顺序约定：前序遍历，邻居按邻接表中的顺序依次递归。
    每个可达顶点恰好出现一次；悬空引用的邻居被跳过。

    注意:
        递归深度等于最长的 DFS 路径长度。超过解释器递归上限时抛出
        InvalidRangeError，这类很长的链状图应该使用 IterativeDepthFirstSearch。
    """

    def execute(self, graph: GraphLike, start: Any) -> List[Any]:
        return super().execute(as_graph(graph), start)

    def _validate_inputs(self, graph: Graph, start: Any) -> None:
        graph.require(start)

    def _execute_core(self, graph: Graph, start: Any) -> List[Any]:
        """从指定起始节点开始执行深度优先搜索。

        参数:
            graph: 要遍历的图（Graph 或邻接表映射）
            start: 搜索的起始节点

        返回:
            List[Any]: 按DFS顺序访问的节点列表

        时间复杂度: O(V + E) - V为顶点数，E为边数
        空间复杂度: O(V) - 需要存储访问状态和递归调用栈

        示例:
            >>> graph = {'A': ['B', 'C'], 'B': ['D'], 'C': [], 'D': []}
            >>> DepthFirstSearch().execute(graph, 'A')
            ['A', 'B', 'D', 'C']
        """
        visited: List[Any] = []  # 存储访问顺序的列表
        seen: Set[Any] = set()   # 记录已访问节点的集合，用于快速查找
        try:
            self._dfs(graph, start, visited, seen)
        except RecursionError:
            raise InvalidRangeError(
                f"图的 DFS 路径超过递归上限（已访问 {len(visited)} 个顶点），请改用 dfs_iterative"
            ) from None
        return visited

    def _dfs(self, graph: Graph, node: Any, visited: List[Any], seen: Set[Any]) -> None:
        seen.add(node)
        visited.append(node)

        for neighbor in graph.neighbors(node):
            if neighbor not in seen:
                self._dfs(graph, neighbor, visited, seen)


class IterativeDepthFirstSearch(ValidatedAlgorithm):
    """使用显式栈的深度优先搜索。

    顶点在出栈时标记为已访问，邻居按逆序压栈，
    这样邻接表中靠前的邻居会先出栈，得到与递归版本相同的
    "从左到右" 前序访问顺序。

    如果邻居按原顺序压栈，访问顺序会变成从右到左，
    与递归版本不再一致；两种实现都保留，顺序约定分别写在各自的文档中。
    """

    def execute(self, graph: GraphLike, start: Any) -> List[Any]:
        return super().execute(as_graph(graph), start)

    def _validate_inputs(self, graph: Graph, start: Any) -> None:
        graph.require(start)

    def _execute_core(self, graph: Graph, start: Any) -> List[Any]:
        visited: List[Any] = []
        seen: Set[Any] = set()
        stack: List[Any] = [start]

        while stack:
            node = stack.pop()
            if node in seen:  # 同一顶点可能被多次压栈
                continue
            seen.add(node)
            visited.append(node)
            for neighbor in reversed(graph.neighbors(node)):
                if neighbor not in seen:
                    stack.append(neighbor)

        return visited


def dfs(graph: GraphLike, start: Any) -> List[Any]:
    return DepthFirstSearch().execute(graph, start)


def dfs_iterative(graph: GraphLike, start: Any) -> List[Any]:
    return IterativeDepthFirstSearch().execute(graph, start)
