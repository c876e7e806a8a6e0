"""冒泡排序算法实现。"""
from ...utils import ensure_sequence, swap
from ...template import ValidatedAlgorithm
from typing import List, Any, Sequence


class BubbleSort(ValidatedAlgorithm):
    """使用冒泡排序算法对列表进行排序。

    冒泡排序是一种简单的排序算法，通过重复遍历列表，
    比较相邻元素并交换它们（如果顺序错误）。
    较大的元素会像气泡一样"冒泡"到列表的末尾。
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
            - 最坏情况: O(n^2)
            - 最好情况: O(n) - 输入已经有序时，第一轮没有交换即提前结束
        空间复杂度: O(n) - 排序在副本上进行

        算法特点:
            - 稳定排序：相等元素的相对位置不会改变
            - 提前退出：某一轮没有发生交换说明已经有序
        """
        arr = list(data)  # 创建数据副本，避免修改原数组
        n = len(arr)

        for i in range(n):
            swapped = False
            # 每轮结束后，最大元素会"冒泡"到正确位置
            for j in range(0, n - i - 1):
                if arr[j] > arr[j + 1]:
                    swap(arr, j, j + 1)
                    swapped = True
            if not swapped:
                break
        return arr


def bubble_sort(data: Sequence[Any]) -> List[Any]:
    return BubbleSort().execute(data)
