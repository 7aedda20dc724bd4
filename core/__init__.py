"""核心模块 - Token系统、词法分析、后缀转换、RPN评估器和操作符"""
from .exceptions import (
    CalculatorError, LexError, ExpressionSyntaxError, EvalError,
    DivisionByZeroError, DomainError
)
from .token_system import (
    TokenType, Token, Associativity, OperatorSpec, OPERATOR_DEFINITIONS,
    FUNCTION_DEFINITIONS, CONSTANT_DEFINITIONS
)
from .operators import Operators
from .tokenizer import tokenize
from .postfix import to_postfix
from .rpn_evaluator import RPNEvaluator

__all__ = [
    'CalculatorError', 'LexError', 'ExpressionSyntaxError', 'EvalError',
    'DivisionByZeroError', 'DomainError',
    'TokenType', 'Token', 'Associativity', 'OperatorSpec',
    'OPERATOR_DEFINITIONS', 'FUNCTION_DEFINITIONS', 'CONSTANT_DEFINITIONS',
    'Operators', 'tokenize', 'to_postfix', 'RPNEvaluator'
]
