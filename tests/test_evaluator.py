"""ExpressionEvaluator facade tests."""
import pytest

from calculator.evaluator import ExpressionEvaluator
from core.exceptions import LexError, ExpressionSyntaxError


class TestExpressionEvaluator:

    def test_evaluate(self):
        assert ExpressionEvaluator().evaluate("2+3*4") == pytest.approx(14.0)

    def test_repeated_expression_hits_cache(self):
        evaluator = ExpressionEvaluator()
        first = evaluator.compile("1+2*3")
        second = evaluator.compile("1+2*3")
        assert first is second
        assert evaluator.cache_info["hits"] == 1
        assert evaluator.cache_info["misses"] == 1

    def test_cache_is_bounded_lru(self):
        evaluator = ExpressionEvaluator(cache_size=2)
        evaluator.compile("1")
        evaluator.compile("2")
        evaluator.compile("1")  # "1" becomes most recent
        evaluator.compile("3")  # evicts "2"
        assert evaluator.cache_info["size"] == 2
        evaluator.compile("1")
        assert evaluator.cache_info["hits"] == 2
        evaluator.compile("2")
        assert evaluator.cache_info["misses"] == 4

    def test_failures_are_not_cached(self):
        evaluator = ExpressionEvaluator()
        for _ in range(2):
            with pytest.raises(LexError):
                evaluator.compile("foo")
        with pytest.raises(ExpressionSyntaxError):
            evaluator.compile("(1")
        assert evaluator.cache_info["size"] == 0

    def test_clear_cache_resets_counters(self):
        evaluator = ExpressionEvaluator()
        evaluator.evaluate("1+1")
        evaluator.evaluate("1+1")
        evaluator.clear_cache()
        assert evaluator.cache_info == {'hits': 0, 'misses': 0, 'size': 0,
                                        'max_size': evaluator.cache_size}
