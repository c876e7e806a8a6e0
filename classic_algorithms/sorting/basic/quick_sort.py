"""快速排序算法实现。

提供两种分区策略：
    - QuickSort: Lomuto 原地分区，以最后一个元素为基准
    - FilterQuickSort: 以中间元素为基准，分成小于/等于/大于三个桶
"""
from ...utils import ensure_sequence, swap
from ...template import ValidatedAlgorithm
from typing import List, Any, Sequence


class QuickSort(ValidatedAlgorithm):
    """使用快速排序算法对列表进行排序。

    快速排序是一种高效的分治排序算法，通过选择一个基准元素，
    将数组分为两部分，然后递归地对两部分进行排序。
    """

    def _validate_inputs(self, data: Any) -> None:
        ensure_sequence(data)

    def _execute_core(self, data: Sequence[Any]) -> List[Any]:
        """返回数据的排序副本。

        参数:
            data: 待排序的数据列表

        返回:
            List[Any]: 排序后的数据副本

        时间复杂度:
            - 平均情况: O(n log n)
            - 最坏情况: O(n^2) - 当数组已经有序或逆序时，基准总是最大或最小值
            - 最好情况: O(n log n)
        空间复杂度: O(log n) - 递归只进入较短的分区，有序或全相等的输入也不会栈溢出
        """
        arr = list(data)  # 创建数据副本，避免修改原数组
        self._quicksort(arr, 0, len(arr) - 1)
        return arr

    def _quicksort(self, arr: List[Any], low: int, high: int) -> None:
        # 只对较短的一侧递归，较长的一侧在循环里继续处理，递归深度为 O(log n)
        while low < high:
            # 分区点左边的元素都小于等于基准值，右边的都大于基准值
            pivot = self._partition(arr, low, high)
            if pivot - low < high - pivot:
                self._quicksort(arr, low, pivot - 1)
                low = pivot + 1
            else:
                self._quicksort(arr, pivot + 1, high)
                high = pivot - 1

    def _partition(self, arr: List[Any], low: int, high: int) -> int:
        """Lomuto 分区：选择最后一个元素作为基准值。

        返回:
            int: 基准值的最终位置索引
        """
        pivot = arr[high]
        i = low - 1  # 小于等于基准值的区域的右边界

        for j in range(low, high):
            if arr[j] <= pivot:
                i += 1
                swap(arr, i, j)

        swap(arr, i + 1, high)
        return i + 1


class FilterQuickSort(ValidatedAlgorithm):
    """基于过滤的快速排序。

    以中间元素为基准，把元素分到小于、等于、大于三个桶中，
    递归排序两侧的桶后拼接。等于桶不再递归，因此大量重复元素时表现良好。

    时间复杂度: 平均 O(n log n)，最坏 O(n^2)
    空间复杂度: O(n) - 每层递归都会创建新的列表
    """

    def _validate_inputs(self, data: Any) -> None:
        ensure_sequence(data)

    def _execute_core(self, data: Sequence[Any]) -> List[Any]:
        return self._sort(list(data))

    def _sort(self, arr: List[Any]) -> List[Any]:
        if len(arr) <= 1:
            return arr
        pivot = arr[len(arr) // 2]
        less = [x for x in arr if x < pivot]
        equal = [x for x in arr if x == pivot]
        greater = [x for x in arr if x > pivot]
        return self._sort(less) + equal + self._sort(greater)


def quick_sort(data: Sequence[Any]) -> List[Any]:
    return QuickSort().execute(data)


def filter_quick_sort(data: Sequence[Any]) -> List[Any]:
    return FilterQuickSort().execute(data)
