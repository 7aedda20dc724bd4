"""core/exceptions.py - 表达式引擎的错误类型"""


class CalculatorError(Exception):
    """所有可恢复的表达式错误的基类"""


class LexError(CalculatorError):
    """未知字符、未知标识符或非法数字字面量"""


class ExpressionSyntaxError(CalculatorError):
    """括号不匹配"""


class EvalError(CalculatorError):
    """后缀表达式不合法（栈下溢或结果数量不为1）"""


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    """除数严格为0"""


class DomainError(CalculatorError, ValueError):
    """函数参数超出定义域（log/ln 非正，sqrt 为负）"""
