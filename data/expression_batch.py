"""批量求值模块 - 从CSV读取表达式列，逐行求值并输出结果表"""
import os
import logging

import numpy as np
import pandas as pd

from calculator.evaluator import ExpressionEvaluator
from config.config import BATCH_CONFIG, DISPLAY_CONFIG
from core.exceptions import CalculatorError
from utils.formatting import format_number

logger = logging.getLogger(__name__)


def load_expressions(file_path, column=None):
    """
    加载表达式数据集。

    Parameters:
    - file_path: CSV 文件路径
    - column: 表达式所在列，默认取 BATCH_CONFIG

    Returns:
    - DataFrame（表达式列按字符串读取，缺失值视为空表达式）
    """
    column = column or BATCH_CONFIG["expression_column"]
    logger.info(f"Loading expressions from {file_path}")

    df = pd.read_csv(file_path, keep_default_na=False)
    if column not in df.columns:
        raise ValueError(f"Expression column '{column}' not found in dataset.")
    df[column] = df[column].astype(str)

    logger.info(f"Loaded {len(df)} expressions")
    return df


def evaluate_frame(df, column=None, evaluator=None):
    """
    对 df[column] 逐行求值，返回附加了 result / display 两列的新 DataFrame。
    单行失败不会中断批处理：result 记为 NaN，display 记为错误消息。
    """
    column = column or BATCH_CONFIG["expression_column"]
    evaluator = evaluator or ExpressionEvaluator()
    log_every = BATCH_CONFIG["log_every"]

    results = []
    displays = []
    n_failed = 0
    for i, text in enumerate(df[column].astype(str), 1):
        expression = text or DISPLAY_CONFIG["empty_display"]
        try:
            value = evaluator.evaluate(expression)
        except CalculatorError as e:
            logger.warning(f"Row {i}: failed to evaluate {expression!r}: {e}")
            n_failed += 1
            results.append(np.nan)
            displays.append(DISPLAY_CONFIG["error_prefix"] + str(e))
            continue

        results.append(value)
        if np.isfinite(value):
            displays.append(format_number(value))
        else:
            displays.append(DISPLAY_CONFIG["non_finite_display"])

        if i % log_every == 0:
            logger.info(f"Evaluated {i}/{len(df)} expressions")

    out = df.copy()
    out[BATCH_CONFIG["result_column"]] = pd.Series(results, index=df.index, dtype=float)
    out[BATCH_CONFIG["display_column"]] = pd.Series(displays, index=df.index, dtype=object)

    logger.info(f"Batch finished: {len(out) - n_failed} ok, {n_failed} failed, "
                f"cache {evaluator.cache_info}")
    return out


def default_output_path(file_path):
    root, ext = os.path.splitext(file_path)
    return f"{root}{BATCH_CONFIG['output_suffix']}{ext or '.csv'}"


def run_batch(file_path, column=None, output_path=None):
    """加载 -> 求值 -> 保存，返回结果 DataFrame"""
    df = load_expressions(file_path, column)
    result = evaluate_frame(df, column)

    output_path = output_path or default_output_path(file_path)
    logger.info(f"Saving results to {output_path}")
    result.to_csv(output_path, index=False)
    return result
