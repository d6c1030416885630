"""交互会话模块"""
from .session import CalculatorSession

__all__ = ['CalculatorSession']
