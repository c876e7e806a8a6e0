"""素数判断算法实现。"""
from typing import Any

from ...template import ValidatedAlgorithm
from ...utils import ensure_int


class PrimeCheck(ValidatedAlgorithm):
    """使用 6k±1 试除法判断整数是否为素数。

    所有大于 3 的素数都可以写成 6k-1 或 6k+1 的形式，
    因此排除 2 和 3 的倍数后，只需要用 5, 7, 11, 13, 17, 19, ... 试除到 sqrt(n)。

    时间复杂度: O(sqrt(n))
    空间复杂度: O(1)
    """

    def _validate_inputs(self, n: Any) -> None:
        ensure_int(n)

    def _execute_core(self, n: int) -> bool:
        """
        示例:
            >>> PrimeCheck().execute(7)
            True
            >>> PrimeCheck().execute(1)
            False
        """
        if n <= 1:
            return False
        if n <= 3:
            return True
        if n % 2 == 0 or n % 3 == 0:
            return False

        i = 5
        while i * i <= n:
            if n % i == 0 or n % (i + 2) == 0:
                return False
            i += 6
        return True


def is_prime(n: int) -> bool:
    return PrimeCheck().execute(n)
