"""字符频率统计。"""
from collections import Counter
from typing import Any, Dict

from ...template import ValidatedAlgorithm
from ...utils import ensure_str


class CharFrequency(ValidatedAlgorithm):
    """统计字符串中每个字符出现的次数。

    返回的映射不保证特定的迭代顺序，调用方应按键查找。

    时间复杂度: O(n)
    空间复杂度: O(k) - k 为不同字符的数量
    """

    def _validate_inputs(self, s: Any) -> None:
        ensure_str(s)

    def _execute_core(self, s: str) -> Dict[str, int]:
        return dict(Counter(s))


def char_frequency(s: str) -> Dict[str, int]:
    return CharFrequency().execute(s)
