"""最大公约数（欧几里得算法）实现。"""
from typing import Any

from ...template import ValidatedAlgorithm
from ...utils import ensure_int


class GreatestCommonDivisor(ValidatedAlgorithm):
    """使用递归欧几里得算法计算两个整数的最大公约数。

    先取绝对值，因此支持负数输入，结果总是非负的：
        gcd(a, 0) = a
        gcd(a, b) = gcd(b, a mod b)

    时间复杂度: O(log(min(a, b)))
    空间复杂度: O(log(min(a, b))) - 递归调用栈
    """

    def _validate_inputs(self, a: Any, b: Any) -> None:
        ensure_int(a, "a")
        ensure_int(b, "b")

    def _execute_core(self, a: int, b: int) -> int:
        """
        示例:
            >>> GreatestCommonDivisor().execute(48, 18)
            6
            >>> GreatestCommonDivisor().execute(-48, 18)
            6
        """
        return self._gcd(abs(a), abs(b))

    def _gcd(self, a: int, b: int) -> int:
        if b == 0:
            return a
        return self._gcd(b, a % b)


def gcd(a: int, b: int) -> int:
    return GreatestCommonDivisor().execute(a, b)
