"""
带输入校验的算法模板

所有需要校验参数的算法都继承 ValidatedAlgorithm：
先在入口处校验输入，再执行核心逻辑。
输入无效时不做任何部分计算，直接抛出 InvalidTypeError 或 InvalidRangeError。
"""

from abc import abstractmethod
from typing import Any

from .base import Algorithm


class ValidatedAlgorithm(Algorithm):
    """
    带入口校验的算法基础类

    子类实现 _execute_core，并按需重写 _validate_inputs。
    校验阶段抛出的异常原样传播给调用方，不做包装。
    """

    def execute(self, *args, **kwargs) -> Any:
        """
        校验输入后执行算法

        Args:
            *args: 位置参数
            **kwargs: 关键字参数

        Returns:
            算法执行结果

        Raises:
            InvalidTypeError: 参数个数或类型无效
            InvalidRangeError: 参数取值无效
        """
        self.check_arguments(*args, **kwargs)
        self._validate_inputs(*args, **kwargs)
        return self._execute_core(*args, **kwargs)

    def _signature_target(self):
        # 子类没有重写 execute 时，真实的参数列表在 _execute_core 上
        if type(self).execute is ValidatedAlgorithm.execute:
            return self._execute_core
        return self.execute

    @abstractmethod
    def _execute_core(self, *args, **kwargs) -> Any:
        """
        核心算法逻辑实现

        子类必须实现此方法，调用时输入已经通过校验。
        """

    def _validate_inputs(self, *args, **kwargs) -> None:
        """
        输入参数验证

        默认不做任何检查，子类可以重写此方法实现自定义验证逻辑。
        """
