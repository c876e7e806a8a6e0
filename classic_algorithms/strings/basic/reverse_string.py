"""字符串反转算法实现。"""
from typing import Any

from ...template import ValidatedAlgorithm
from ...utils import ensure_str


class ReverseString(ValidatedAlgorithm):
    """按 Unicode 码位反转字符串。

    Python 字符串以码位为单位迭代，因此超出基本多文种平面的字符
    （例如表情符号）会作为一个整体被反转，不会被拆成两半。
    """

    def _validate_inputs(self, s: Any) -> None:
        ensure_str(s)

    def _execute_core(self, s: str) -> str:
        """返回反转后的新字符串。

        参数:
            s: 待反转的字符串

        返回:
            str: 反转后的字符串

        时间复杂度: O(n)
        空间复杂度: O(n)

        示例:
            >>> ReverseString().execute("hello")
            'olleh'
        """
        return s[::-1]


def reverse_string(s: str) -> str:
    """返回 s 的反转结果。"""
    return ReverseString().execute(s)
