"""数组最大值查找。"""
from functools import reduce
from typing import Any, Sequence

from ...errors import InvalidRangeError
from ...template import ValidatedAlgorithm
from ...utils import ensure_sequence


def _larger(current: Any, candidate: Any) -> Any:
    return candidate if candidate > current else current


class FindMax(ValidatedAlgorithm):
    """线性扫描求序列中的最大元素。

    使用 functools.reduce 归约，不依赖递归，也不把整个序列
    展开为函数参数，因此对非常长的序列同样适用。
    存在多个相等的最大值时返回第一个。

    异常:
        InvalidTypeError: 输入不是序列
        InvalidRangeError: 输入为空序列

    时间复杂度: O(n)
    空间复杂度: O(1)
    """

    def _validate_inputs(self, data: Any) -> None:
        ensure_sequence(data)
        if len(data) == 0:
            raise InvalidRangeError("不能在空序列中查找最大值")

    def _execute_core(self, data: Sequence[Any]) -> Any:
        return reduce(_larger, data)


def find_max(data: Sequence[Any]) -> Any:
    return FindMax().execute(data)
