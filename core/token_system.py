"""core/token_system.py"""
import string
from dataclasses import dataclass
from enum import Enum
from typing import Callable

import numpy as np

from core.operators import Operators


class TokenType(Enum):
    NUMBER = "number"      # 数字字面量
    OPERATOR = "operator"  # + - * / ^
    FUNCTION = "function"  # sin cos tan log ln sqrt
    PAREN = "paren"        # ( )
    CONSTANT = "constant"  # pi e


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class OperatorSpec:
    symbol: str
    precedence: int
    associativity: Associativity
    apply: Callable[[float, float], float]

    @property
    def right_assoc(self) -> bool:
        return self.associativity is Associativity.RIGHT


# 操作符定义：优先级 + 结合性
OPERATOR_DEFINITIONS = {
    '+': OperatorSpec('+', 1, Associativity.LEFT, Operators.add),
    '-': OperatorSpec('-', 1, Associativity.LEFT, Operators.sub),
    '*': OperatorSpec('*', 2, Associativity.LEFT, Operators.mul),
    '/': OperatorSpec('/', 2, Associativity.LEFT, Operators.div),
    '^': OperatorSpec('^', 3, Associativity.RIGHT, Operators.pow),
}

# 一元函数（封闭集合），每个名字对应 Operators 中带定义域检查的实现
FUNCTION_DEFINITIONS = {
    'sin': Operators.sin,
    'cos': Operators.cos,
    'tan': Operators.tan,
    'log': Operators.log,
    'ln': Operators.ln,
    'sqrt': Operators.sqrt,
}

# 常数
CONSTANT_DEFINITIONS = {
    'pi': float(np.pi),
    'e': float(np.e),
}

PARENS = ('(', ')')
DIGITS = string.digits
LETTERS = string.ascii_letters
NUMBER_CHARS = DIGITS + '.'


@dataclass(frozen=True)
class Token:
    """不可变的词法单元；构造时校验 text 与 type 是否匹配"""
    type: TokenType
    text: str

    def __post_init__(self):
        if self.type is TokenType.NUMBER:
            valid = (self.text.count('.') <= 1
                     and any(ch in DIGITS for ch in self.text)
                     and all(ch in NUMBER_CHARS for ch in self.text))
        elif self.type is TokenType.OPERATOR:
            valid = self.text in OPERATOR_DEFINITIONS
        elif self.type is TokenType.FUNCTION:
            valid = self.text in FUNCTION_DEFINITIONS
        elif self.type is TokenType.CONSTANT:
            valid = self.text in CONSTANT_DEFINITIONS
        else:
            valid = self.text in PARENS
        if not valid:
            raise ValueError(f"{self.text!r} is not a valid {self.type.value} token")

    @property
    def is_operand(self) -> bool:
        return self.type in (TokenType.NUMBER, TokenType.CONSTANT)

    @property
    def is_open_paren(self) -> bool:
        return self.type is TokenType.PAREN and self.text == '('

    @property
    def operator(self) -> OperatorSpec:
        return OPERATOR_DEFINITIONS[self.text]

    def __str__(self):
        return self.text


def format_tokens(tokens) -> str:
    """把 Token 序列拼成空格分隔的字符串，便于日志输出"""
    return ' '.join(t.text for t in tokens)
