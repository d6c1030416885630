"""core/lexer.py - 把表达式字符串切分为Token序列"""
import logging

import numpy as np

from core.errors import LexError
from core.token_system import (
    Token, TokenType, UNARY_MINUS, OPERATOR_CHARS, LEFT_PAREN, RIGHT_PAREN
)

logger = logging.getLogger(__name__)


def _is_digit(c):
    # isdigit() 会接受 "²" 之类的 Unicode 数字
    return "0" <= c <= "9"


def _starts_number(source, i):
    """数字，或紧跟数字的小数点，开始一个数字字面量"""
    c = source[i]
    if _is_digit(c):
        return True
    return c == '.' and i + 1 < len(source) and _is_digit(source[i + 1])


def _is_unary_position(tokens):
    """'-' 出现在开头、任意操作符之后或 '(' 之后时是一元负号"""
    if not tokens:
        return True
    return tokens[-1].type in (TokenType.OPERATOR, TokenType.LEFT_PAREN)


def _read_number(source, i):
    """读取最长的数字/小数点串，返回 (Token, 下一个位置)"""
    start = i
    has_decimal = False
    while i < len(source) and (_is_digit(source[i]) or source[i] == '.'):
        if source[i] == '.':
            if has_decimal:
                raise LexError("multiple decimal points")
            has_decimal = True
        i += 1
    value = np.float64(source[start:i])
    if not np.isfinite(value):
        # 超出 float64 范围的字面量会变成 inf
        raise LexError("number out of range")
    return Token.number(value), i


def tokenize(source):
    """
    单次从左到右扫描，不回溯

    Args:
        source: 表达式字符串，如 "3 - -2" 或 "(1+2)*50%"
    Returns:
        Token列表；数字Token从不带符号，负号总是单独的 'neg' 操作符
    Raises:
        LexError: 未知字符或数字中有多个小数点
    """
    tokens = []
    i = 0

    while i < len(source):
        c = source[i]

        if c.isspace():
            i += 1
            continue

        if c == '-' and _is_unary_position(tokens):
            tokens.append(Token.operator(UNARY_MINUS))
            i += 1
            continue

        if _starts_number(source, i):
            token, i = _read_number(source, i)
            tokens.append(token)
            continue

        if c in OPERATOR_CHARS:
            tokens.append(Token.operator(c))
            i += 1
            continue

        if c == '(':
            tokens.append(LEFT_PAREN)
            i += 1
            continue

        if c == ')':
            tokens.append(RIGHT_PAREN)
            i += 1
            continue

        raise LexError(f"unknown character: {c}")

    logger.debug(f"Tokenized {source!r} into {len(tokens)} tokens")
    return tokens
