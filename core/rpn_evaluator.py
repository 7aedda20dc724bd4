"""RPN表达式求值器 - 调用统一的Operators类"""
import numpy as np
import logging

from core.exceptions import EvalError
from core.token_system import (
    TokenType, CONSTANT_DEFINITIONS, FUNCTION_DEFINITIONS, format_tokens
)

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(postfix):
        """
        Args:
            postfix: 后缀顺序的 Token 序列
        Returns:
            float 结果；溢出时可能为 inf，负数开非整数次方时为 nan
        Raises:
            EvalError: 栈下溢或最终栈中不是恰好一个值
            DivisionByZeroError / DomainError: 由 Operators 抛出
        """
        stack = []

        # 溢出/无效运算交给调用方按非有限值处理，这里不产生警告
        with np.errstate(all='ignore'):
            for token in postfix:
                if token.type is TokenType.NUMBER:
                    stack.append(float(token.text))

                elif token.type is TokenType.CONSTANT:
                    stack.append(CONSTANT_DEFINITIONS[token.text])

                # ================== 二元操作符 ==================
                elif token.type is TokenType.OPERATOR:
                    if len(stack) < 2:
                        logger.debug(f"Insufficient operands for {token.text}")
                        raise EvalError("invalid expression")
                    operand2 = stack.pop()
                    operand1 = stack.pop()
                    stack.append(token.operator.apply(operand1, operand2))

                # ================== 一元函数 ==================
                elif token.type is TokenType.FUNCTION:
                    if not stack:
                        logger.debug(f"Insufficient operands for {token.text}")
                        raise EvalError("invalid function call")
                    operand = stack.pop()
                    stack.append(FUNCTION_DEFINITIONS[token.text](operand))

                else:
                    raise EvalError(f"unexpected token in postfix: {token.text}")

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluating "
                         f"'{format_tokens(postfix)}', expected 1")
            raise EvalError("invalid expression")
        return stack[0]
