"""core/shunting_yard.py - 中缀Token序列转后缀(RPN)"""
import logging

from core.errors import ExpressionSyntaxError
from core.token_system import TokenType

logger = logging.getLogger(__name__)


def _should_pop(top, incoming):
    """
    栈顶操作符优先级更高时弹出；优先级相同时只有左结合的新操作符才弹出
    （右结合的 2^3^2 因此按 2^(3^2) 嵌套）
    """
    top_spec = top.spec
    in_spec = incoming.spec
    if top_spec.precedence > in_spec.precedence:
        return True
    return top_spec.precedence == in_spec.precedence and not in_spec.right_associative


def to_postfix(tokens):
    """
    Shunting-yard 算法

    Args:
        tokens: tokenize() 输出的中缀Token序列
    Returns:
        后缀Token序列（不含括号）
    Raises:
        ExpressionSyntaxError: 多余的 ')' 或未闭合的 '('
    """
    output = []
    op_stack = []

    for token in tokens:
        if token.is_number:
            output.append(token)

        elif token.is_operator:
            while op_stack and op_stack[-1].is_operator and _should_pop(op_stack[-1], token):
                output.append(op_stack.pop())
            op_stack.append(token)

        elif token.type == TokenType.LEFT_PAREN:
            op_stack.append(token)

        elif token.type == TokenType.RIGHT_PAREN:
            while op_stack and op_stack[-1].type != TokenType.LEFT_PAREN:
                output.append(op_stack.pop())
            if not op_stack:
                raise ExpressionSyntaxError("unexpected ')'")
            op_stack.pop()  # 丢弃 '('

    while op_stack:
        top = op_stack.pop()
        if top.type == TokenType.LEFT_PAREN:
            raise ExpressionSyntaxError("unclosed '('")
        output.append(top)

    logger.debug(f"Postfix: {' '.join(str(t) for t in output)}")
    return output
