"""Test RPNEvaluator and Operators."""

import numpy as np
import pytest

from core import RPNEvaluator, EvalError, Token, UNARY_MINUS, Operators
from utils.trace import RecordingTraceSink


def _seq(*items):
    """Numbers become NUMBER tokens, strings become operators."""
    return [Token.operator(x) if isinstance(x, str) else Token.number(x) for x in items]


@pytest.mark.parametrize("items,expected", [
    ((2, 3, '+'), 5.0),
    ((8, 2, '-'), 6.0),
    ((8, 2, '/'), 4.0),
    ((3, 4, '*'), 12.0),
    ((2, 3, '^'), 8.0),
    ((5, UNARY_MINUS), -5.0),
    ((5, UNARY_MINUS, UNARY_MINUS), 5.0),
    ((50, '%'), 0.5),
    ((2, 3, 2, '^', '^'), 512.0),
    ((3, 4, 2, '*', '+'), 11.0),
    ((7,), 7.0),
])
def test_evaluate(items, expected):
    """Right operand is popped first, then left."""
    assert RPNEvaluator.evaluate(_seq(*items)) == expected


def test_result_is_float64():
    assert isinstance(RPNEvaluator.evaluate(_seq(1, 2, '+')), np.float64)


@pytest.mark.parametrize("items,message", [
    ((UNARY_MINUS,), "missing operand for unary minus"),
    (('%',), "missing operand for '%'"),
    (('+',), "missing operand for binary operator"),
    ((1, '*'), "missing operand for binary operator"),
    ((5, 0, '/'), "division by zero"),
    ((5, 0, UNARY_MINUS, '/'), "division by zero"),
    ((1, 2), "malformed expression"),
    ((), "malformed expression"),
])
def test_evaluate_errors(items, message):
    with pytest.raises(EvalError) as excinfo:
        RPNEvaluator.evaluate(_seq(*items))
    assert excinfo.value.message == message


def test_power_of_negative_base_is_nan():
    """(-8)^(1/3) stays real: IEEE pow gives nan."""
    result = RPNEvaluator.evaluate(_seq(8, UNARY_MINUS, 1, 3, '/', '^'))
    assert np.isnan(result)


def test_overflow_is_inf():
    assert RPNEvaluator.evaluate(_seq(10, 400, '^')) == np.inf


def test_zero_dividend_is_allowed():
    assert RPNEvaluator.evaluate(_seq(0, 5, '/')) == 0.0


def test_trace_events():
    """Trace sink sees pushes, pops and applications in order."""
    sink = RecordingTraceSink()
    result = RPNEvaluator.evaluate(_seq(2, 3, '+'), trace=sink)
    assert result == 5.0
    assert sink.events == [
        ('push', 2.0),
        ('push', 3.0),
        ('pop', 3.0),
        ('pop', 2.0),
        ('apply', '+', (2.0, 3.0), 5.0),
        ('push', 5.0),
    ]


def test_trace_does_not_change_result():
    items = _seq(2, 3, 2, '^', '^', UNARY_MINUS)
    assert RPNEvaluator.evaluate(items, trace=RecordingTraceSink()) == RPNEvaluator.evaluate(items)


def test_unknown_kernel():
    with pytest.raises(EvalError):
        Operators.apply('modulo', np.float64(1), np.float64(2))
