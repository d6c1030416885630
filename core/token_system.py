"""core/token_system.py"""
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

import numpy as np


class TokenType(Enum):
    NUMBER = "number"            # 数字
    OPERATOR = "operator"        # 操作符
    LEFT_PAREN = "left_paren"    # (
    RIGHT_PAREN = "right_paren"  # )


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Token:
    type: TokenType
    symbol: str = None
    value: np.float64 = None

    @classmethod
    def number(cls, value):
        return cls(TokenType.NUMBER, value=np.float64(value))

    @classmethod
    def operator(cls, symbol):
        if symbol not in OPERATOR_DEFINITIONS:
            raise KeyError(f"unknown operator symbol: {symbol}")
        return cls(TokenType.OPERATOR, symbol=symbol)

    @property
    def is_number(self):
        return self.type == TokenType.NUMBER

    @property
    def is_operator(self):
        return self.type == TokenType.OPERATOR

    @property
    def spec(self):
        """操作符的元数据（非操作符返回None）"""
        if self.type != TokenType.OPERATOR:
            return None
        return OPERATOR_DEFINITIONS[self.symbol]

    def __str__(self):
        if self.type == TokenType.NUMBER:
            return f"{self.value:g}"
        if self.type == TokenType.OPERATOR:
            return self.symbol
        return "(" if self.type == TokenType.LEFT_PAREN else ")"


@dataclass(frozen=True)
class OperatorSpec:
    symbol: str
    precedence: int
    associativity: Associativity
    arity: int
    kernel: str  # Operators 上对应的方法名

    @property
    def right_associative(self):
        return self.associativity == Associativity.RIGHT


# 一元负号的内部符号，与二元减法区分
UNARY_MINUS = 'neg'

# 操作符定义表：Reorderer 和 Evaluator 共用的唯一来源，只读
OPERATOR_DEFINITIONS = MappingProxyType({
    # 加减
    '+': OperatorSpec('+', 1, Associativity.LEFT, 2, 'add'),
    '-': OperatorSpec('-', 1, Associativity.LEFT, 2, 'sub'),

    # 乘除
    '*': OperatorSpec('*', 2, Associativity.LEFT, 2, 'mul'),
    '/': OperatorSpec('/', 2, Associativity.LEFT, 2, 'div'),

    # 一元负号
    UNARY_MINUS: OperatorSpec(UNARY_MINUS, 3, Associativity.RIGHT, 1, 'neg'),

    # 乘方
    '^': OperatorSpec('^', 4, Associativity.RIGHT, 2, 'pow'),

    # 百分号：后缀一元，除以100（不是取模）
    '%': OperatorSpec('%', 5, Associativity.RIGHT, 1, 'percent'),
})

# 源文本中可直接出现的操作符字符
OPERATOR_CHARS = frozenset('+-*/^%')

LEFT_PAREN = Token(TokenType.LEFT_PAREN)
RIGHT_PAREN = Token(TokenType.RIGHT_PAREN)
