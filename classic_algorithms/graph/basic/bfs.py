"""Breadth-first search algorithm."""
from collections import deque
from ...template import ValidatedAlgorithm
from ...utils import Graph, GraphLike, as_graph
from typing import Any, Deque, List, Optional


class BreadthFirstSearch(ValidatedAlgorithm):
    """广度优先搜索算法实现。

    广度优先搜索（BFS）是一种图遍历算法，它按层次顺序访问图中的节点。
    算法从起始节点开始，首先访问所有距离为1的邻居节点，然后访问距离为2的节点，
    以此类推，直到访问完所有可达的节点。

    算法特点：
        - 使用队列（FIFO）来实现
        - 按距离递增的顺序访问节点
        - 邻居在入队时即标记为已访问，避免同一顶点重复入队
    """

    def execute(self, graph: GraphLike, start: Any) -> List[Any]:
        return super().execute(as_graph(graph), start)

    def _validate_inputs(self, graph: Graph, start: Any) -> None:
        graph.require(start)

    def _execute_core(self, graph: Graph, start: Any) -> List[Any]:
        """从指定起始节点开始执行广度优先搜索。

        参数:
            graph: 要遍历的图（Graph 或邻接表映射）
            start: 搜索的起始节点

        返回:
            List[Any]: 按BFS顺序访问的节点列表

        时间复杂度: O(V + E) - V为顶点数，E为边数，每个顶点和边都被访问一次
        空间复杂度: O(V) - 队列和访问标记集合最多存储所有顶点

        算法步骤:
            1. 将起始节点加入队列并标记为已访问
            2. 当队列不为空时：
               - 从队列前端取出一个节点
               - 将该节点加入访问序列
               - 将其所有未访问的邻居加入队列并标记为已访问

        示例:
            >>> graph = {'A': ['B', 'C'], 'B': ['A', 'D'], 'C': ['A', 'D'],
            ...          'D': ['B', 'C', 'E'], 'E': ['D']}
            >>> BreadthFirstSearch().execute(graph, 'A')
            ['A', 'B', 'C', 'D', 'E']
        """
        visited: List[Any] = []
        queue: Deque[Any] = deque([start])
        seen = {start}

        while queue:
            node = queue.popleft()
            visited.append(node)

            for neighbor in graph.neighbors(node):
                if neighbor not in seen:
                    seen.add(neighbor)
                    queue.append(neighbor)

        return visited


class ShortestPath(ValidatedAlgorithm):
    """按边数计算无权图中两点之间的最短路径。

    队列中存放的是从起点出发的完整路径，而不是单个顶点。
    BFS 按路径长度不减的顺序展开，所以第一次发现终点时得到的路径就是最短的。
    """

    def execute(self, graph: GraphLike, start: Any, end: Any) -> Optional[List[Any]]:
        return super().execute(as_graph(graph), start, end)

    def _validate_inputs(self, graph: Graph, start: Any, end: Any) -> None:
        graph.require(start)
        graph.require(end)

    def _execute_core(self, graph: Graph, start: Any, end: Any) -> Optional[List[Any]]:
        """
        返回:
            Optional[List[Any]]: 从 start 到 end 的顶点序列；
            start == end 时为 [start]；不可达时为 None
        """
        if start == end:
            return [start]

        queue: Deque[List[Any]] = deque([[start]])
        seen = {start}

        while queue:
            path = queue.popleft()
            for neighbor in graph.neighbors(path[-1]):
                if neighbor == end:
                    return path + [neighbor]
                if neighbor not in seen:
                    seen.add(neighbor)
                    queue.append(path + [neighbor])

        return None


def bfs(graph: GraphLike, start: Any) -> List[Any]:
    return BreadthFirstSearch().execute(graph, start)


def bfs_shortest_path(graph: GraphLike, start: Any, end: Any) -> Optional[List[Any]]:
    return ShortestPath().execute(graph, start, end)
