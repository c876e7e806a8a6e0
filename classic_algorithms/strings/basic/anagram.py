"""变位词（anagram）判断算法实现。"""
from typing import Any

from ...template import ValidatedAlgorithm
from ...utils import ensure_str
from .palindrome import normalize


class Anagram(ValidatedAlgorithm):
    """判断两个字符串是否互为变位词。

    两个字符串先做与回文判断相同的规范化（小写、去空白），
    再把各自的字符按码位排序后比较。

    时间复杂度: O(n log n) - 排序主导
    空间复杂度: O(n)
    """

    def _validate_inputs(self, a: Any, b: Any) -> None:
        ensure_str(a, "a")
        ensure_str(b, "b")

    def _execute_core(self, a: str, b: str) -> bool:
        """
        示例:
            >>> Anagram().execute("Listen", "Silent")
            True
            >>> Anagram().execute("Dormitory", "dirty room")
            True
        """
        return sorted(normalize(a)) == sorted(normalize(b))


def is_anagram(a: str, b: str) -> bool:
    return Anagram().execute(a, b)
