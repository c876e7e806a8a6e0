"""使用记忆化递归计算斐波那契数列。"""
from typing import Any, Dict

from ...template import ValidatedAlgorithm
from ...utils import ensure_non_negative_int

# 预热缓存时每一段的长度，保证单次递归深度不超过这个值
_WARMUP_STRIDE = 256


class Fibonacci(ValidatedAlgorithm):
    """计算第 n 个斐波那契数。

    斐波那契数列是一个经典的数学序列，其中每个数字是前两个数字的和。
    序列开始为：0, 1, 1, 2, 3, 5, 8, 13, 21, 34, ...

    数学定义：
        F(0) = 0
        F(1) = 1
        F(n) = F(n-1) + F(n-2) for n > 1

    本实现使用记忆化递归：缓存在每次顶层调用时新建，
    并在这次调用的所有递归中共享，调用结束后即被丢弃，
    不会在无关调用之间无限增长。

    参数:
        memoize: 为 False 时使用朴素递归（指数时间），仅用于对比
    """

    def __init__(self, memoize: bool = True) -> None:
        self.memoize = memoize

    def _validate_inputs(self, n: Any) -> None:
        ensure_non_negative_int(n)

    def _execute_core(self, n: int) -> int:
        """返回第 n 个斐波那契数。

        参数:
            n: 要计算的斐波那契数的位置（从0开始）

        返回:
            int: 第 n 个斐波那契数

        时间复杂度: O(n)（记忆化）；O(2^n)（朴素递归）
        空间复杂度: O(n) - 缓存

        对于很大的 n，先按固定步长由小到大预热缓存，
        这样每次递归只需向下走一个步长就会命中缓存，递归深度有界。

        示例:
            >>> fib = Fibonacci()
            >>> fib.execute(0)  # 返回 0
            >>> fib.execute(1)  # 返回 1
            >>> fib.execute(10) # 返回 55
        """
        if n <= 1:
            return n
        if not self.memoize:
            return self._naive(n)

        cache: Dict[int, int] = {}
        for k in range(_WARMUP_STRIDE, n, _WARMUP_STRIDE):
            self._memoized(k, cache)
        return self._memoized(n, cache)

    def _memoized(self, n: int, cache: Dict[int, int]) -> int:
        if n <= 1:
            return n
        if n in cache:
            return cache[n]
        value = self._memoized(n - 1, cache) + self._memoized(n - 2, cache)
        cache[n] = value
        return value

    def _naive(self, n: int) -> int:
        if n <= 1:
            return n
        return self._naive(n - 1) + self._naive(n - 2)


def fibonacci(n: int, memoize: bool = True) -> int:
    return Fibonacci(memoize=memoize).execute(n)
