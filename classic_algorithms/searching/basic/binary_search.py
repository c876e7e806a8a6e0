"""二分搜索算法实现。"""
from typing import Any, Sequence

from ...template import ValidatedAlgorithm
from ...utils import ensure_sequence

NOT_FOUND = -1


class BinarySearch(ValidatedAlgorithm):
    """使用二分搜索技术在已排序列表中查找元素。

    二分搜索是一种高效的搜索算法，通过反复将搜索区间对半分割，
    快速定位目标元素。前提条件是数据必须已经按升序排序，
    算法内部不做检查，未排序的输入结果不可靠。

    算法原理：
        1. 比较中间元素与目标值
        2. 如果相等，返回索引
        3. 如果中间元素小于目标值，搜索右半部分
        4. 如果中间元素大于目标值，搜索左半部分
        5. 重复直到找到目标或搜索区间为空
    """

    def _validate_inputs(self, data: Any, target: Any) -> None:
        ensure_sequence(data)

    def _execute_core(self, data: Sequence[Any], target: Any) -> int:
        """在已排序的数据中查找目标值的索引。

        参数:
            data: 已排序的数据列表（必须是升序）
            target: 要查找的目标值

        返回:
            int: 目标值的索引，如果未找到则返回 -1

        时间复杂度: O(log n) - 每次搜索范围减半
        空间复杂度: O(1) - 只使用常数额外空间

        示例:
            >>> searcher = BinarySearch()
            >>> searcher.execute([1, 2, 3, 4, 5], 4)
            3
            >>> searcher.execute([1, 2, 3, 4, 5], 6)
            -1
        """
        left, right = 0, len(data) - 1

        while left <= right:
            mid = left + (right - left) // 2

            if data[mid] == target:
                return mid
            elif data[mid] < target:
                left = mid + 1
            else:
                right = mid - 1

        return NOT_FOUND


def binary_search(data: Sequence[Any], target: Any) -> int:
    return BinarySearch().execute(data, target)
