"""阶乘算法实现。"""
from typing import Any

from ...template import ValidatedAlgorithm
from ...utils import ensure_non_negative_int


class Factorial(ValidatedAlgorithm):
    """递归计算 n!。

    Python 整数是任意精度的，不存在溢出问题，结果总是精确值。
    递归乘积采用二分区间的方式：product(lo, hi) = product(lo, mid) * product(mid+1, hi)，
    递归深度为 O(log n)，即使 n 很大也不会触及解释器的递归深度上限。

    异常:
        InvalidTypeError: n 不是整数
        InvalidRangeError: n 为负数（阶乘无定义）
    """

    def _validate_inputs(self, n: Any) -> None:
        ensure_non_negative_int(n)

    def _execute_core(self, n: int) -> int:
        """
        示例:
            >>> Factorial().execute(5)
            120
            >>> Factorial().execute(0)
            1
        """
        if n <= 1:
            return 1
        return self._product(2, n)

    def _product(self, low: int, high: int) -> int:
        """返回 low * (low + 1) * ... * high。"""
        if low > high:
            return 1
        if low == high:
            return low
        if high - low == 1:
            return low * high
        mid = (low + high) // 2
        return self._product(low, mid) * self._product(mid + 1, high)


def factorial(n: int) -> int:
    return Factorial().execute(n)
