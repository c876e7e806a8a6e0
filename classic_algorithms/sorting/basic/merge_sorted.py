"""合并两个有序数组。"""
from ...template import ValidatedAlgorithm
from ...utils import ensure_sequence
from typing import List, Any, Sequence


class MergeSortedArrays(ValidatedAlgorithm):
    """把两个各自升序的序列合并为一个升序列表。

    反复比较两个序列当前的头部元素，取较小者追加到结果中，
    其中一个耗尽后把另一个的剩余部分整体追加。
    相等时优先取第一个序列的元素，因此合并是稳定的。

    时间复杂度: O(n + m)
    空间复杂度: O(n + m)
    """

    def _validate_inputs(self, a: Any, b: Any) -> None:
        ensure_sequence(a, "a")
        ensure_sequence(b, "b")

    def _execute_core(self, a: Sequence[Any], b: Sequence[Any]) -> List[Any]:
        """
        示例:
            >>> MergeSortedArrays().execute([1, 3, 5], [2, 4, 6])
            [1, 2, 3, 4, 5, 6]
        """
        merged: List[Any] = []
        i = j = 0
        while i < len(a) and j < len(b):
            if a[i] <= b[j]:
                merged.append(a[i])
                i += 1
            else:
                merged.append(b[j])
                j += 1
        merged.extend(a[i:])
        merged.extend(b[j:])
        return merged


def merge_sorted_arrays(a: Sequence[Any], b: Sequence[Any]) -> List[Any]:
    return MergeSortedArrays().execute(a, b)
