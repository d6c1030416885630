"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.errors import EvalError
from core.token_system import UNARY_MINUS
from core.operators import Operators

logger = logging.getLogger(__name__)

# 一元操作符缺少操作数时的报错信息
_UNARY_MISSING = {
    UNARY_MINUS: "missing operand for unary minus",
    '%': "missing operand for '%'",
}


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence, trace=None):
        """
        评估后缀表达式
        Args:
            token_sequence: to_postfix() 输出的Token序列
            trace: 可选的 TraceSink，只接收事件，不影响结果
        Returns:
            np.float64 结果
        Raises:
            EvalError: 缺少操作数、除零、最终栈大小不为1
        """
        stack = []

        for token in token_sequence:
            if token.is_number:
                stack.append(token.value)
                if trace is not None:
                    trace.pushed(token.value)
                continue

            if not token.is_operator:
                # 括号不应出现在后缀序列中
                logger.error(f"Unexpected token in postfix sequence: {token}")
                raise EvalError("malformed expression")

            spec = token.spec

            # ================== 一元操作符处理 ==================
            if spec.arity == 1:
                if len(stack) < 1:
                    logger.debug(f"Insufficient operands for {token.symbol}")
                    raise EvalError(_UNARY_MISSING[token.symbol])
                operands = (stack.pop(),)

            # ================== 二元操作符处理 ==================
            else:
                if len(stack) < 2:
                    logger.debug(f"Insufficient operands for {token.symbol}")
                    raise EvalError("missing operand for binary operator")
                operand2 = stack.pop()
                operand1 = stack.pop()
                operands = (operand1, operand2)

            if trace is not None:
                for value in reversed(operands):
                    trace.popped(value)

            result = Operators.apply(spec.kernel, *operands)
            stack.append(result)
            if trace is not None:
                trace.applied(token.symbol, operands, result)
                trace.pushed(result)

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise EvalError("malformed expression")

        return stack[0]
