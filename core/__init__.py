"""核心模块 - Token系统、词法分析、后缀转换、RPN评估器和操作符"""
from .errors import (
    ErrorKind, CalculatorError, LexError, ExpressionSyntaxError, EvalError
)
from .token_system import (
    TokenType, Token, Associativity, OperatorSpec, OPERATOR_DEFINITIONS,
    UNARY_MINUS
)
from .lexer import tokenize
from .shunting_yard import to_postfix
from .rpn_evaluator import RPNEvaluator
from .operators import Operators

__all__ = [
    'ErrorKind', 'CalculatorError', 'LexError', 'ExpressionSyntaxError', 'EvalError',
    'TokenType', 'Token', 'Associativity', 'OperatorSpec', 'OPERATOR_DEFINITIONS',
    'UNARY_MINUS', 'tokenize', 'to_postfix', 'RPNEvaluator', 'Operators'
]
