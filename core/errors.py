"""core/errors.py - 计算器错误类型"""
from enum import Enum


class ErrorKind(Enum):
    LEX = "lex"        # 词法错误
    SYNTAX = "syntax"  # 括号不匹配
    EVAL = "eval"      # 求值错误


class CalculatorError(Exception):
    """所有流水线错误的基类，message 原样展示给用户"""

    kind = None

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class LexError(CalculatorError):
    """未知字符或非法数字字面量"""
    kind = ErrorKind.LEX


class ExpressionSyntaxError(CalculatorError):
    """括号不匹配"""
    kind = ErrorKind.SYNTAX


class EvalError(CalculatorError):
    """缺少操作数、除零或最终栈不平衡"""
    kind = ErrorKind.EVAL
