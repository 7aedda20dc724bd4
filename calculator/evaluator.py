import logging
from collections import OrderedDict

from config.config import ENGINE_CONFIG
from core import RPNEvaluator, tokenize, to_postfix

logger = logging.getLogger(__name__)


class ExpressionEvaluator:
    """tokenize -> to_postfix -> RPNEvaluator 的组合，带后缀表达式缓存"""

    def __init__(self, cache_size=None):
        self.rpn_evaluator = RPNEvaluator
        # 使用有限大小的OrderedDict实现LRU缓存
        self.cache_size = cache_size if cache_size is not None else ENGINE_CONFIG["cache_size"]
        self._postfix_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    @property
    def cache_info(self):
        return {
            'hits': self._cache_hits,
            'misses': self._cache_misses,
            'size': len(self._postfix_cache),
            'max_size': self.cache_size,
        }

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._postfix_cache) > self.cache_size:
            # 删除最久未使用的条目
            self._postfix_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        self._postfix_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    def compile(self, text):
        """
        把表达式文本编译为后缀 Token 元组；只缓存成功的结果，
        LexError / ExpressionSyntaxError 原样向上抛出。
        """
        if text in self._postfix_cache:
            # 移到末尾（最近使用）
            self._postfix_cache.move_to_end(text)
            self._cache_hits += 1
            logger.debug(f"Cache hit for expression: {text[:50]}")
            return self._postfix_cache[text]

        self._cache_misses += 1
        postfix = tuple(to_postfix(tokenize(text)))
        self._postfix_cache[text] = postfix
        self._manage_cache()
        return postfix

    def evaluate(self, text):
        """
        Args:
            text: 表达式文本
        Returns:
            float 结果（可能为 inf / nan）
        Raises:
            CalculatorError 的各个子类
        """
        return self.rpn_evaluator.evaluate(self.compile(text))
