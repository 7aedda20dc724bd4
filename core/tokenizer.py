"""core/tokenizer.py - 把表达式文本切分为 Token 序列"""
import logging

from core.exceptions import LexError
from core.token_system import (
    Token, TokenType, OPERATOR_DEFINITIONS, FUNCTION_DEFINITIONS,
    CONSTANT_DEFINITIONS, PARENS, DIGITS, LETTERS, NUMBER_CHARS
)

logger = logging.getLogger(__name__)


def _scan(text, start, charset):
    """从 start 开始贪婪读取 charset 中的字符，返回结束位置"""
    end = start
    while end < len(text) and text[end] in charset:
        end += 1
    return end


def tokenize(text):
    """
    Args:
        text: 原始表达式文本（空白字符会被全部去掉）
    Returns:
        Token 列表；空文本返回空列表
    Raises:
        LexError: 未知字符 / 未知标识符 / 数字中出现多个小数点
    """
    cleaned = ''.join(text.split())
    tokens = []
    i = 0

    while i < len(cleaned):
        ch = cleaned[i]

        # 数字（含小数点）
        if ch in NUMBER_CHARS:
            end = _scan(cleaned, i, NUMBER_CHARS)
            literal = cleaned[i:end]
            if literal.count('.') > 1 or literal == '.':
                raise LexError(f"invalid number format: {literal}")
            tokens.append(Token(TokenType.NUMBER, literal))
            i = end
            continue

        # 标识符：先查函数，再查常数
        if ch in LETTERS:
            end = _scan(cleaned, i, LETTERS + DIGITS)
            name = cleaned[i:end]
            if name in FUNCTION_DEFINITIONS:
                tokens.append(Token(TokenType.FUNCTION, name))
            elif name in CONSTANT_DEFINITIONS:
                tokens.append(Token(TokenType.CONSTANT, name))
            else:
                raise LexError(f"unknown identifier: {name}")
            i = end
            continue

        if ch in PARENS:
            tokens.append(Token(TokenType.PAREN, ch))
        elif ch in OPERATOR_DEFINITIONS:
            tokens.append(Token(TokenType.OPERATOR, ch))
        else:
            raise LexError(f"invalid character: {ch}")
        i += 1

    logger.debug(f"Tokenized {text!r} into {len(tokens)} tokens")
    return tokens
