"""数据模块 - 批量表达式求值"""
from .expression_batch import load_expressions, evaluate_frame, run_batch

__all__ = ['load_expressions', 'evaluate_frame', 'run_batch']
