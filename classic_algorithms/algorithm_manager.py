"""
算法管理器 - 算法注册、执行和监控

提供统一的算法接口，支持按名称注册和执行算法、记录执行指标，
以及通过线程池批量执行。管理器参数从配置中心的 ``manager`` 段读取。
"""

import threading
import time
from typing import Any, Dict, List, Optional, Tuple, Type
from concurrent.futures import ThreadPoolExecutor, Future
from dataclasses import dataclass
from enum import Enum

import structlog
from pydantic import BaseModel, Field

from .base import Algorithm
from .common.configuration import ConfigurationHub, get_hub
from .errors import AlgorithmNotFoundError
from .strings.basic.reverse_string import ReverseString
from .strings.basic.palindrome import Palindrome
from .strings.basic.char_frequency import CharFrequency
from .strings.basic.anagram import Anagram
from .numeric.basic.prime import PrimeCheck
from .numeric.basic.factorial import Factorial
from .numeric.basic.gcd import GreatestCommonDivisor
from .dynamic_programming.basic.fibonacci import Fibonacci
from .searching.basic.two_sum import TwoSum
from .searching.basic.binary_search import BinarySearch
from .sorting.basic.bubble_sort import BubbleSort
from .sorting.basic.quick_sort import QuickSort, FilterQuickSort
from .sorting.basic.merge_sorted import MergeSortedArrays
from .arrays.basic.find_max import FindMax
from .data_structures.basic.linked_list import LinkedList
from .data_structures.basic.stack import Stack
from .data_structures.basic.queue import Queue
from .graph.basic.dfs import DepthFirstSearch, IterativeDepthFirstSearch
from .graph.basic.bfs import BreadthFirstSearch, ShortestPath

logger = structlog.get_logger(__name__)


class AlgorithmCategory(Enum):
    """算法分类枚举"""
    STRINGS = "strings"
    NUMERIC = "numeric"
    DYNAMIC_PROGRAMMING = "dynamic_programming"
    SEARCHING = "searching"
    SORTING = "sorting"
    ARRAYS = "arrays"
    DATA_STRUCTURES = "data_structures"
    GRAPH = "graph"


@dataclass
class AlgorithmMetrics:
    """算法执行指标"""
    execution_time: float
    success: bool = True
    error_message: Optional[str] = None
    input_size: Optional[int] = None


class AlgorithmConfig(BaseModel):
    """单个算法的配置"""
    enable_metrics: bool = True


class ManagerSettings(BaseModel):
    """管理器配置，对应配置中心的 ``manager`` 段"""
    max_workers: int = Field(default=4, ge=1)
    metrics_history_limit: int = Field(default=1000, ge=1)
    enable_metrics: bool = True


# 默认注册表：(名称, 类, 分类)，顺序即 list_algorithms 的输出顺序
DEFAULT_ALGORITHMS: Tuple[Tuple[str, Type[Algorithm], AlgorithmCategory], ...] = (
    ("reverse_string", ReverseString, AlgorithmCategory.STRINGS),
    ("is_palindrome", Palindrome, AlgorithmCategory.STRINGS),
    ("char_frequency", CharFrequency, AlgorithmCategory.STRINGS),
    ("is_anagram", Anagram, AlgorithmCategory.STRINGS),
    ("is_prime", PrimeCheck, AlgorithmCategory.NUMERIC),
    ("factorial", Factorial, AlgorithmCategory.NUMERIC),
    ("gcd", GreatestCommonDivisor, AlgorithmCategory.NUMERIC),
    ("fibonacci", Fibonacci, AlgorithmCategory.DYNAMIC_PROGRAMMING),
    ("two_sum", TwoSum, AlgorithmCategory.SEARCHING),
    ("binary_search", BinarySearch, AlgorithmCategory.SEARCHING),
    ("bubble_sort", BubbleSort, AlgorithmCategory.SORTING),
    ("quick_sort", QuickSort, AlgorithmCategory.SORTING),
    ("filter_quick_sort", FilterQuickSort, AlgorithmCategory.SORTING),
    ("merge_sorted_arrays", MergeSortedArrays, AlgorithmCategory.SORTING),
    ("find_max", FindMax, AlgorithmCategory.ARRAYS),
    # 数据结构的 execute 返回当前快照
    ("linked_list", LinkedList, AlgorithmCategory.DATA_STRUCTURES),
    ("stack", Stack, AlgorithmCategory.DATA_STRUCTURES),
    ("queue", Queue, AlgorithmCategory.DATA_STRUCTURES),
    ("dfs", DepthFirstSearch, AlgorithmCategory.GRAPH),
    ("dfs_iterative", IterativeDepthFirstSearch, AlgorithmCategory.GRAPH),
    ("bfs", BreadthFirstSearch, AlgorithmCategory.GRAPH),
    ("bfs_shortest_path", ShortestPath, AlgorithmCategory.GRAPH),
)


class AlgorithmRegistry:
    """算法注册表"""

    def __init__(self):
        self._algorithms: Dict[str, Type[Algorithm]] = {}
        self._categories: Dict[str, AlgorithmCategory] = {}
        self._configs: Dict[str, AlgorithmConfig] = {}
        self._register_default_algorithms()

    def _register_default_algorithms(self) -> None:
        for name, algorithm_class, category in DEFAULT_ALGORITHMS:
            self.register(name, algorithm_class, category)

    def register(self, name: str, algorithm_class: Type[Algorithm],
                category: AlgorithmCategory, config: Optional[AlgorithmConfig] = None) -> None:
        """
        注册算法

        Args:
            name: 算法名称
            algorithm_class: 算法类
            category: 算法分类
            config: 算法配置
        """
        if not isinstance(algorithm_class, type) or not issubclass(algorithm_class, Algorithm):
            raise ValueError(f"算法类 {algorithm_class} 必须继承自 Algorithm")

        self._algorithms[name] = algorithm_class
        self._categories[name] = category
        self._configs[name] = config or AlgorithmConfig()

    def get_algorithm(self, name: str) -> Type[Algorithm]:
        """获取算法类"""
        if name not in self._algorithms:
            raise AlgorithmNotFoundError(name)
        return self._algorithms[name]

    def get_category(self, name: str) -> Optional[AlgorithmCategory]:
        """获取算法分类"""
        return self._categories.get(name)

    def get_config(self, name: str) -> AlgorithmConfig:
        """获取算法配置"""
        return self._configs.get(name, AlgorithmConfig())

    def list_algorithms(self, category: Optional[AlgorithmCategory] = None) -> List[str]:
        """列出算法"""
        if category is None:
            return list(self._algorithms.keys())
        return [name for name, cat in self._categories.items() if cat == category]


def load_manager_settings(hub: Optional[ConfigurationHub] = None) -> ManagerSettings:
    """从配置中心读取管理器配置，缺少 ``manager`` 段时使用默认值。"""
    return (hub or get_hub()).section("manager", ManagerSettings)


class AlgorithmManager:
    """
    算法管理器

    按名称执行已注册的算法并记录执行指标。
    算法抛出的异常在记录失败指标后原样重新抛出。
    """

    def __init__(self, settings: Optional[ManagerSettings] = None,
                 registry: Optional[AlgorithmRegistry] = None):
        self.settings = settings or ManagerSettings()
        self.registry = registry or AlgorithmRegistry()
        self.executor = ThreadPoolExecutor(max_workers=self.settings.max_workers)
        self._metrics_history: Dict[str, List[AlgorithmMetrics]] = {}
        self._metrics_lock = threading.Lock()

    def execute_algorithm(self, algorithm_name: str, *args, **kwargs) -> Any:
        """
        执行算法

        Args:
            algorithm_name: 算法名称
            *args: 算法参数
            **kwargs: 算法关键字参数

        Returns:
            算法执行结果

        Raises:
            AlgorithmNotFoundError: 算法不存在
            AlgorithmError: 算法输入无效（包括参数个数不匹配）
        """
        algorithm_class = self.registry.get_algorithm(algorithm_name)
        record = self.settings.enable_metrics and self.registry.get_config(algorithm_name).enable_metrics

        input_size = _estimate_input_size(args, kwargs)
        log = logger.bind(algorithm=algorithm_name, input_size=input_size)

        started = time.perf_counter()
        try:
            algorithm = algorithm_class()
            algorithm.check_arguments(*args, **kwargs)
            result = algorithm.execute(*args, **kwargs)
        except Exception as exc:
            elapsed = time.perf_counter() - started
            if record:
                self._record_metrics(algorithm_name, AlgorithmMetrics(
                    elapsed, success=False, error_message=str(exc), input_size=input_size))
            log.error("algorithm failed", error_type=type(exc).__name__, error=str(exc))
            raise

        elapsed = time.perf_counter() - started
        if record:
            self._record_metrics(algorithm_name, AlgorithmMetrics(elapsed, input_size=input_size))
        log.info("algorithm executed", seconds=round(elapsed, 6))
        return result

    def execute_algorithm_async(self, algorithm_name: str, *args, **kwargs) -> Future:
        """在线程池中执行算法，返回 Future 对象"""
        return self.executor.submit(self.execute_algorithm, algorithm_name, *args, **kwargs)

    def batch_execute(self, tasks: List[Dict[str, Any]]) -> List[Any]:
        """
        批量执行算法

        Args:
            tasks: 任务列表，每个任务包含 ``algorithm`` 以及可选的 ``args`` / ``kwargs``

        Returns:
            执行结果列表，与任务一一对应；失败的任务对应 None
        """
        futures = [
            self.execute_algorithm_async(
                task["algorithm"], *task.get("args", ()), **task.get("kwargs", {}))
            for task in tasks
        ]

        results: List[Any] = []
        for index, future in enumerate(futures):
            try:
                results.append(future.result())
            except Exception as exc:
                # 失败已由 execute_algorithm 记录，这里只标出任务序号
                logger.warning("batch task failed", task_index=index,
                               algorithm=tasks[index]["algorithm"], error=str(exc))
                results.append(None)
        return results

    def get_metrics(self, algorithm_name: str) -> List[AlgorithmMetrics]:
        """获取算法执行指标"""
        with self._metrics_lock:
            return list(self._metrics_history.get(algorithm_name, []))

    def get_performance_summary(self, algorithm_name: str) -> Dict[str, Any]:
        """
        汇总执行指标

        耗时统计只计入成功的执行；没有任何记录时返回空字典。
        """
        metrics = self.get_metrics(algorithm_name)
        if not metrics:
            return {}

        durations = [m.execution_time for m in metrics if m.success]
        summary: Dict[str, Any] = {
            "total_executions": len(metrics),
            "successful_executions": len(durations),
            "success_rate": len(durations) / len(metrics),
        }
        if durations:
            summary.update(
                avg_execution_time=sum(durations) / len(durations),
                min_execution_time=min(durations),
                max_execution_time=max(durations),
                total_execution_time=sum(durations),
            )
        return summary

    def _record_metrics(self, algorithm_name: str, metrics: AlgorithmMetrics) -> None:
        limit = self.settings.metrics_history_limit
        with self._metrics_lock:
            history = self._metrics_history.setdefault(algorithm_name, [])
            history.append(metrics)
            # 只保留最近 limit 条
            if len(history) > limit:
                del history[:-limit]

    def shutdown(self) -> None:
        """关闭算法管理器"""
        self.executor.shutdown(wait=True)


# 全局算法管理器实例
_algorithm_manager: Optional[AlgorithmManager] = None


def get_algorithm_manager() -> AlgorithmManager:
    """获取全局算法管理器实例，首次调用时按配置中心的设置创建"""
    global _algorithm_manager
    if _algorithm_manager is None:
        _algorithm_manager = AlgorithmManager(load_manager_settings())
    return _algorithm_manager


def execute_algorithm(algorithm_name: str, *args, **kwargs) -> Any:
    """便捷函数：执行算法"""
    return get_algorithm_manager().execute_algorithm(algorithm_name, *args, **kwargs)


def register_algorithm(name: str, algorithm_class: Type[Algorithm],
                      category: AlgorithmCategory, config: Optional[AlgorithmConfig] = None) -> None:
    """便捷函数：注册算法"""
    get_algorithm_manager().registry.register(name, algorithm_class, category, config)


def _estimate_input_size(args: tuple, kwargs: dict) -> Optional[int]:
    """所有带长度的参数的长度之和；没有这类参数时返回 None"""
    sizes = [len(value) for value in (*args, *kwargs.values()) if hasattr(value, "__len__")]
    return sum(sizes) or None
