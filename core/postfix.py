"""core/postfix.py - shunting-yard：中缀 Token 序列转后缀（RPN）"""
import logging

from core.exceptions import ExpressionSyntaxError
from core.token_system import TokenType, format_tokens

logger = logging.getLogger(__name__)


def _resolves_before(top, incoming):
    """栈顶 top 是否应在 incoming 操作符入栈前先输出"""
    if top.type is TokenType.FUNCTION:
        return True
    if top.type is not TokenType.OPERATOR:
        return False
    top_op, new_op = top.operator, incoming.operator
    if top_op.right_assoc:
        return top_op.precedence > new_op.precedence
    return top_op.precedence >= new_op.precedence


def to_postfix(tokens):
    """
    Args:
        tokens: tokenize() 产生的中缀 Token 序列
    Returns:
        后缀顺序的 Token 列表，不含任何括号
    Raises:
        ExpressionSyntaxError: 括号不匹配
    """
    output = []
    stack = []  # 操作符、函数和左括号

    for token in tokens:
        if token.is_operand:
            output.append(token)
        elif token.type is TokenType.FUNCTION:
            stack.append(token)
        elif token.type is TokenType.OPERATOR:
            while stack and _resolves_before(stack[-1], token):
                output.append(stack.pop())
            stack.append(token)
        elif token.is_open_paren:
            stack.append(token)
        else:
            # ')'：弹出直到遇到匹配的 '('
            while stack and not stack[-1].is_open_paren:
                output.append(stack.pop())
            if not stack:
                raise ExpressionSyntaxError("mismatched parentheses")
            stack.pop()
            # 函数绑定到刚闭合的括号组
            if stack and stack[-1].type is TokenType.FUNCTION:
                output.append(stack.pop())

    while stack:
        top = stack.pop()
        if top.type is TokenType.PAREN:
            raise ExpressionSyntaxError("mismatched parentheses")
        output.append(top)

    logger.debug(f"Postfix: {format_tokens(output)}")
    return output
