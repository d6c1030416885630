import logging
from collections import OrderedDict
from typing import Optional

from core import (
    tokenize, to_postfix, RPNEvaluator, CalculatorError, ErrorKind
)
from config.config import CALCULATOR_CONFIG

logger = logging.getLogger(__name__)


class EvaluationResult:
    """一次求值的结果：要么有数值，要么有错误，没有部分结果"""

    __slots__ = ('value', 'error')

    def __init__(self, value: Optional[float] = None, error: Optional[CalculatorError] = None):
        if (value is None) == (error is None):
            raise ValueError("exactly one of value and error must be set")
        self.value = value
        self.error = error

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return None if self.error is None else self.error.kind

    @property
    def message(self) -> Optional[str]:
        return None if self.error is None else self.error.message

    def unwrap(self) -> float:
        """返回数值；失败时重新抛出原错误"""
        if self.error is not None:
            raise self.error
        return self.value

    def __repr__(self):
        if self.ok:
            return f"EvaluationResult(value={self.value!r})"
        return f"EvaluationResult(error={self.kind.value}: {self.message!r})"


class ExpressionEvaluator:
    """
    tokenize -> to_postfix -> RPNEvaluator 三个阶段的入口

    流水线是输入的纯函数，所以结果（包括错误）可以按表达式文本缓存。
    缓存属于实例本身，不是线程安全的。
    """

    def __init__(self, cache_size=None, trace=None):
        self.rpn_evaluator = RPNEvaluator
        self.trace = trace
        # 使用有限大小的OrderedDict实现LRU缓存
        self.cache_size = CALCULATOR_CONFIG["cache_size"] if cache_size is None else cache_size
        self._result_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._result_cache) > self.cache_size:
            # 删除最旧的条目
            self._result_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        self._result_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    @property
    def cache_info(self):
        return {
            'hits': self._cache_hits,
            'misses': self._cache_misses,
            'size': len(self._result_cache),
            'max_size': self.cache_size,
        }

    def evaluate(self, text: str) -> EvaluationResult:
        """
        Args:
            text: 中缀表达式，如 "2^3^2" 或 "(1 + 2) * 50%"
        Returns:
            EvaluationResult；CalculatorError 不会抛出，而是放在结果里
        """
        # 追踪打开时每次都要重新走一遍流水线
        use_cache = self.cache_size > 0 and self.trace is None

        if use_cache and text in self._result_cache:
            # 移到末尾（最近使用）
            self._result_cache.move_to_end(text)
            self._cache_hits += 1
            logger.debug(f"Cache hit for expression: {text[:50]}")
            return self._result_cache[text]

        self._cache_misses += 1

        try:
            result = EvaluationResult(value=self._evaluate_impl(text))
        except CalculatorError as e:
            logger.debug(f"Error evaluating expression '{text[:50]}': {e.kind.value}: {e.message}")
            result = EvaluationResult(error=e)

        if use_cache:
            self._result_cache[text] = result
            self._manage_cache()
        return result

    def _evaluate_impl(self, text: str) -> float:
        tokens = tokenize(text)
        if self.trace is not None:
            self.trace.stage("After Tokenization", tokens)

        postfix = to_postfix(tokens)
        if self.trace is not None:
            self.trace.stage("Postfix Conversion", postfix)

        return float(self.rpn_evaluator.evaluate(postfix, trace=self.trace))


_default_evaluator = None


def evaluate_expression(text: str) -> EvaluationResult:
    """使用模块级默认求值器"""
    global _default_evaluator
    if _default_evaluator is None:
        _default_evaluator = ExpressionEvaluator()
    return _default_evaluator.evaluate(text)
