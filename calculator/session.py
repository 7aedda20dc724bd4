"""输入会话：累积表达式文本并在求值时驱动表达式引擎"""
import logging
import math
import re

from calculator.evaluator import ExpressionEvaluator
from config.config import DISPLAY_CONFIG, INPUT_CONFIG
from core.exceptions import CalculatorError
from utils.formatting import format_number

logger = logging.getLogger(__name__)

_ALLOWED_FRAGMENT = re.compile(INPUT_CONFIG["allowed_pattern"])


class InputSession:
    """
    单一状态的状态机：状态就是表达式缓冲区（可以为空）。
    每次可见状态变化都会调用 on_change(display_string)。
    """

    def __init__(self, on_change, evaluator=None):
        self._on_change = on_change
        self._input = ''
        self.evaluator = evaluator if evaluator is not None else ExpressionEvaluator()

    @property
    def text(self):
        return self._input

    def _display_text(self):
        return self._input or DISPLAY_CONFIG["empty_display"]

    def append(self, fragment):
        # 只允许数字、字母（函数/常数）、操作符、小数点和括号
        if not _ALLOWED_FRAGMENT.fullmatch(fragment):
            logger.debug(f"Ignored fragment {fragment!r}")
            return
        self._input += fragment
        self._on_change(self._display_text())

    def backspace(self):
        self._input = self._input[:-1]
        self._on_change(self._display_text())

    def clear(self):
        self._input = ''
        self._on_change(DISPLAY_CONFIG["empty_display"])

    def evaluate(self):
        """
        求值当前缓冲区。成功时用格式化结果替换缓冲区；
        失败时缓冲区保持不变，只显示错误消息。
        Returns:
            本次发送给 on_change 的字符串
        """
        expression = self._input or DISPLAY_CONFIG["empty_display"]
        try:
            result = self.evaluator.evaluate(expression)
        except CalculatorError as e:
            logger.info(f"Evaluation of {expression!r} failed: {e}")
            message = DISPLAY_CONFIG["error_prefix"] + str(e)
            self._on_change(message)
            return message

        if math.isfinite(result):
            self._input = format_number(result)
        else:
            logger.info(f"Expression {expression!r} produced non-finite result {result}")
            self._input = DISPLAY_CONFIG["non_finite_display"]
        self._on_change(self._input)
        return self._input
