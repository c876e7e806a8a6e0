import inspect
from abc import ABC, abstractmethod
from typing import Any, Callable

from .errors import InvalidTypeError


class Algorithm(ABC):
    """算法与数据结构的公共基类。

    注册表只依赖两点：类可以无参实例化，实例提供 execute 方法。
    各模块另外提供同名的便捷函数（如 ``bubble_sort``），内部就是
    ``BubbleSort().execute(...)``。
    """

    @classmethod
    def summary(cls) -> str:
        """类文档字符串的第一行，没有文档时返回空字符串。"""
        doc = inspect.getdoc(cls)
        return doc.splitlines()[0] if doc else ""

    def check_arguments(self, *args, **kwargs) -> None:
        """检查参数的个数和名称能否匹配 execute 的真实签名。

        Raises:
            InvalidTypeError: 参数缺失、多余或关键字未知
        """
        try:
            inspect.signature(self._signature_target()).bind(*args, **kwargs)
        except TypeError as exc:
            raise InvalidTypeError(f"{type(self).__name__} 的参数不匹配: {exc}") from None

    def _signature_target(self) -> Callable[..., Any]:
        return self.execute

    @abstractmethod
    def execute(self, *args, **kwargs) -> Any:
        """执行算法并返回结果，参数与返回值由子类决定。"""
        raise NotImplementedError
