"""两数之和（哈希表单次扫描）。"""
from typing import Any, Dict, List, Sequence

from ...template import ValidatedAlgorithm
from ...utils import ensure_sequence


class TwoSum(ValidatedAlgorithm):
    """查找和为目标值的两个元素的索引。

    单次扫描，同时维护 "已见过的值 -> 索引" 的查找表。
    对每个新值计算补数 target - value，若补数已经出现过，
    立即返回 [较早的索引, 当前索引]。

    只返回按扫描顺序找到的第一对；没有解时返回空列表。
    值重复出现时查找表保留最近一次的索引。

    时间复杂度: O(n)
    空间复杂度: O(n)
    """

    def _validate_inputs(self, nums: Any, target: Any) -> None:
        ensure_sequence(nums, "nums")

    def _execute_core(self, nums: Sequence[Any], target: Any) -> List[int]:
        """
        示例:
            >>> TwoSum().execute([2, 7, 11, 15], 9)
            [0, 1]
            >>> TwoSum().execute([1, 2], 10)
            []
        """
        seen: Dict[Any, int] = {}
        for index, value in enumerate(nums):
            complement = target - value
            if complement in seen:
                return [seen[complement], index]
            seen[value] = index
        return []


def two_sum(nums: Sequence[Any], target: Any) -> List[int]:
    return TwoSum().execute(nums, target)
