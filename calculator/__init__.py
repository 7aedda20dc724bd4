"""计算器模块 - 表达式求值门面、输入会话和键盘映射"""
from .evaluator import ExpressionEvaluator
from .session import InputSession
from .keypad import Keypad

__all__ = ['ExpressionEvaluator', 'InputSession', 'Keypad']
