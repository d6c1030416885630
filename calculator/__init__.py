"""表达式求值入口 - 结果封装和缓存"""
from .evaluator import ExpressionEvaluator, EvaluationResult, evaluate_expression

__all__ = ['ExpressionEvaluator', 'EvaluationResult', 'evaluate_expression']
