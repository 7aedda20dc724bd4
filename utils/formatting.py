"""utils/formatting.py - 结果显示格式化"""
import math

import numpy as np

from config.config import DISPLAY_CONFIG


def format_number(value, significant=None):
    """
    按有效数字四舍五入后输出最短的十进制定点表示。

    - 去掉小数部分末尾的0，以及随之悬空的小数点
    - 从不使用科学计数法，结果总能被重新解析为数字
    - -0 显示为 0

    Args:
        value: 有限的 float
        significant: 有效数字位数，默认取 DISPLAY_CONFIG
    Returns:
        str
    """
    if significant is None:
        significant = DISPLAY_CONFIG["significant_digits"]
    if not math.isfinite(value):
        raise ValueError(f"cannot format non-finite value: {value}")

    text = np.format_float_positional(
        value, precision=significant, unique=False, fractional=False, trim='-'
    )
    if text == '-0':
        return '0'
    return text
