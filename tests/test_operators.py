"""Operators and lookup-table tests."""
import math

import pytest

from config.config import validate_config
from core.exceptions import DivisionByZeroError, DomainError
from core.operators import Operators
from core.token_system import (
    Associativity, CONSTANT_DEFINITIONS, FUNCTION_DEFINITIONS, OPERATOR_DEFINITIONS
)


class TestOperatorTable:

    @pytest.mark.parametrize("symbol, precedence, associativity", [
        ("+", 1, Associativity.LEFT),
        ("-", 1, Associativity.LEFT),
        ("*", 2, Associativity.LEFT),
        ("/", 2, Associativity.LEFT),
        ("^", 3, Associativity.RIGHT),
    ])
    def test_precedence_and_associativity(self, symbol, precedence, associativity):
        spec = OPERATOR_DEFINITIONS[symbol]
        assert spec.precedence == precedence
        assert spec.associativity is associativity

    def test_closed_vocabularies(self):
        assert set(FUNCTION_DEFINITIONS) == {"sin", "cos", "tan", "log", "ln", "sqrt"}
        assert set(CONSTANT_DEFINITIONS) == {"pi", "e"}

    def test_config_is_consistent_with_tables(self):
        assert validate_config()


class TestOperators:

    def test_binary_results_are_python_floats(self):
        for fn in (Operators.add, Operators.sub, Operators.mul, Operators.div, Operators.pow):
            assert type(fn(6, 3)) is float

    def test_div_rejects_exact_zero(self):
        with pytest.raises(DivisionByZeroError, match="division by zero"):
            Operators.div(1.0, 0.0)
        with pytest.raises(DivisionByZeroError):
            Operators.div(1.0, -0.0)

    def test_div_accepts_tiny_divisor(self):
        assert Operators.div(1.0, 1e-300) == pytest.approx(1e300)

    def test_log_is_base_ten(self):
        assert Operators.log(100.0) == pytest.approx(2.0)

    def test_ln_is_natural(self):
        assert Operators.ln(math.e ** 3) == pytest.approx(3.0)

    @pytest.mark.parametrize("fn, arg", [
        (Operators.log, 0.0),
        (Operators.log, -1.0),
        (Operators.ln, 0.0),
        (Operators.ln, -5.0),
        (Operators.sqrt, -1.0),
    ])
    def test_domain_guards(self, fn, arg):
        with pytest.raises(DomainError):
            fn(arg)

    def test_domain_error_is_value_error(self):
        with pytest.raises(ValueError):
            Operators.sqrt(-4.0)
