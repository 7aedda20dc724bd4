"""core/operators.py"""
import numpy as np
import logging

from core.exceptions import DivisionByZeroError, DomainError

logger = logging.getLogger(__name__)


class Operators:
    """所有操作符与函数的静态方法集合，输入输出均为 float"""

    # 二元操作符====================

    @staticmethod
    def add(operand1, operand2):
        return float(np.add(operand1, operand2))

    @staticmethod
    def sub(operand1, operand2):
        return float(np.subtract(operand1, operand2))

    @staticmethod
    def mul(operand1, operand2):
        return float(np.multiply(operand1, operand2))

    @staticmethod
    def div(operand1, operand2):
        """除法：除数严格为0时报错，不返回 inf"""
        if operand2 == 0:
            raise DivisionByZeroError("division by zero")
        return float(np.divide(operand1, operand2))

    @staticmethod
    def pow(operand1, operand2):
        """幂运算；负数的非整数次幂得到 nan，溢出得到 inf"""
        return float(np.power(float(operand1), float(operand2)))

    # 一元函数====================

    @staticmethod
    def sin(operand):
        return float(np.sin(operand))

    @staticmethod
    def cos(operand):
        return float(np.cos(operand))

    @staticmethod
    def tan(operand):
        return float(np.tan(operand))

    @staticmethod
    def log(operand):
        """以10为底的对数，参数必须为正"""
        if operand <= 0:
            raise DomainError(f"log domain error: {operand:g}")
        return float(np.log10(operand))

    @staticmethod
    def ln(operand):
        """自然对数，参数必须为正"""
        if operand <= 0:
            raise DomainError(f"ln domain error: {operand:g}")
        return float(np.log(operand))

    @staticmethod
    def sqrt(operand):
        """平方根，参数不能为负"""
        if operand < 0:
            raise DomainError(f"sqrt domain error: {operand:g}")
        return float(np.sqrt(operand))
