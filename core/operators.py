"""core/operators.py"""
import logging

import numpy as np

from core.errors import EvalError

logger = logging.getLogger(__name__)


class Operators:
    """所有操作符的静态方法集合，操作数均为 np.float64"""

    # 一元操作符====================

    @staticmethod
    def neg(operand):
        """一元负号"""
        return np.negative(operand)

    @staticmethod
    def percent(operand):
        """百分号：x% = x / 100"""
        return np.divide(operand, np.float64(100.0))

    # 二元操作符========================================

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        return np.add(operand1, operand2)

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        return np.subtract(operand1, operand2)

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        return np.multiply(operand1, operand2)

    @staticmethod
    def div(operand1, operand2):
        """除法操作符，除数恰好为0时报错"""
        if operand2 == 0:
            raise EvalError("division by zero")
        return np.divide(operand1, operand2)

    @staticmethod
    def pow(operand1, operand2):
        """
        乘方 operand1 ** operand2
        负数的非整数次幂得到 nan，溢出得到 inf（不抛异常、不产生复数）
        """
        with np.errstate(all='ignore'):
            return np.power(operand1, operand2)

    @staticmethod
    def apply(kernel, *operands):
        """按名称调用对应的操作符"""
        op_method = getattr(Operators, kernel, None)
        if op_method is None:
            logger.error(f"Unknown operator kernel: {kernel}")
            raise EvalError(f"unknown operator: {kernel}")
        with np.errstate(all='ignore'):
            return np.float64(op_method(*operands))
