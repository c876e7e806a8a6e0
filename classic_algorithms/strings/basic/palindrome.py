"""回文判断算法实现。"""
import re
from typing import Any

from ...template import ValidatedAlgorithm
from ...utils import ensure_str

_WHITESPACE = re.compile(r"\s+")


def normalize(s: str) -> str:
    """转为小写并去掉所有空白字符。"""
    return _WHITESPACE.sub("", s.lower())


class Palindrome(ValidatedAlgorithm):
    """判断字符串是否为回文，忽略大小写和空白。

    规范化步骤：
        1. 转换为小写
        2. 删除所有空白字符
    然后比较规范化后的字符串与其反转是否相等。
    """

    def _validate_inputs(self, s: Any) -> None:
        ensure_str(s)

    def _execute_core(self, s: str) -> bool:
        """
        示例:
            >>> Palindrome().execute("hello")
            False
            >>> Palindrome().execute("Never odd or even")
            True
        """
        cleaned = normalize(s)
        return cleaned == cleaned[::-1]


def is_palindrome(s: str) -> bool:
    return Palindrome().execute(s)
