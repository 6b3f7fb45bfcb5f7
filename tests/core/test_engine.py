"""Tests for gigaint/core/engine.py: dispatch table + evaluate functions."""

from __future__ import annotations

import pytest

from gigaint import (
    ArityError,
    BigInt,
    DivisionByZeroError,
    ErrorKind,
    InvariantError,
    MalformedLiteralError,
    MathDomainError,
    OperandTypeError,
    OpResult,
    Operation,
    UnknownOperationError,
    evaluate,
    evaluate_or_raise,
    from_int,
    from_str,
)
from gigaint.core import engine
from gigaint.core.engine import arity, coerce_operand
from gigaint.kernels.types import DigitVector


# ---------------------------------------------------------------------------
# Accepted results
# ---------------------------------------------------------------------------

class TestAccepted:
    @pytest.mark.parametrize(
        "op, operands, expected",
        [
            ("add", ("1999999999111111111", "-3222222222111111111000000000"), "-3222222220111111111888888889"),
            ("subtract", ("5", "7"), "-2"),
            ("multiply", ("-1000000000", "1999999999777777777"), "-1999999999777777777000000000"),
            ("divide", ("3222222222111111111000000000", "1000000000"), "3222222222111111111"),
            ("divide", ("-7", "2"), "-4"),
            ("modulo", ("-7", "2"), "1"),
            ("log", ("1000", "10"), "3"),
            ("power_mod", ("2", "10", "1000"), "24"),
            ("abs", ("-12",), "12"),
            ("negate", ("12",), "-12"),
            ("compare", ("-1", "1"), "-1"),
            ("compare", ("4", "4"), "0"),
            ("compare", ("1000000000", "999999999"), "1"),
        ],
    )
    def test_by_name(self, op, operands, expected):
        r = evaluate(op, *operands)
        assert r.ok
        assert r.error_kind is None
        assert r.value == from_str(expected)

    def test_enum_and_mixed_operands(self):
        r = evaluate(Operation.ADD, from_int(5), 7)
        assert r.ok
        assert r.value == from_int(12)

    def test_str_operands_are_stripped(self):
        r = evaluate("add", " 5\n", "\t7")
        assert r.ok
        assert r.value == from_int(12)

    def test_arity_table(self):
        assert arity(Operation.POWER_MOD) == 3
        assert arity(Operation.NEGATE) == 1
        assert arity(Operation.ADD) == 2
        for op in Operation:
            assert arity(op) in (1, 2, 3)


# ---------------------------------------------------------------------------
# Rejected results
# ---------------------------------------------------------------------------

class TestRejected:
    def test_division_by_zero_has_no_value(self):
        r = evaluate("divide", "1", "0")
        assert not r.ok
        assert r.value is None
        assert r.error_kind is ErrorKind.DIVISION_BY_ZERO
        assert r.message

    def test_modulo_by_zero(self):
        r = evaluate("modulo", "1", "-0")
        assert r.error_kind is ErrorKind.DIVISION_BY_ZERO

    def test_math_domain(self):
        assert evaluate("log", "0", "10").error_kind is ErrorKind.MATH_DOMAIN
        assert evaluate("power_mod", "2", "-1", "7").error_kind is ErrorKind.MATH_DOMAIN

    def test_malformed_literal(self):
        r = evaluate("add", "12a", "1")
        assert not r.ok
        assert r.error_kind is ErrorKind.MALFORMED_LITERAL

    def test_unknown_operation(self):
        r = evaluate("sqrt", "4")
        assert not r.ok
        assert r.error_kind is ErrorKind.UNKNOWN_OPERATION
        assert "sqrt" in (r.message or "")

    @pytest.mark.parametrize("bad", [1.5, None, True, b"12", [1]])
    def test_operand_type(self, bad):
        r = evaluate("add", bad, 2)
        assert not r.ok
        assert r.value is None
        assert r.error_kind is ErrorKind.OPERAND_TYPE
        assert type(bad).__name__ in (r.message or "")

    @pytest.mark.parametrize("operands", [(), ("1",), ("1", "2", "3")])
    def test_arity(self, operands):
        r = evaluate("add", *operands)
        assert not r.ok
        assert r.error_kind is ErrorKind.ARITY

    def test_invariant_violation_is_reported(self, monkeypatch):
        def broken(a: BigInt, b: BigInt) -> BigInt:
            raise InvariantError(["digits_canonical"])

        monkeypatch.setitem(engine._DISPATCH, Operation.ADD, (2, broken))
        r = evaluate("add", "1", "2")
        assert not r.ok
        assert r.error_kind is ErrorKind.INVARIANT
        assert r.violations == ("digits_canonical",)

    def test_non_canonical_result_caught_when_checks_enabled(self, monkeypatch):
        from gigaint.config import load_config

        monkeypatch.setenv("GIGAINT_CHECK_INVARIANTS", "1")
        load_config.cache_clear()
        try:
            from gigaint.core import bigint as bi

            def leading_zero(a: BigInt, b: BigInt) -> BigInt:
                return bi._make(DigitVector((1, 0)))

            monkeypatch.setitem(engine._DISPATCH, Operation.ADD, (2, leading_zero))
            r = evaluate("add", "1", "2")
            assert r.error_kind is ErrorKind.INVARIANT
            assert "digits_canonical" in r.violations
        finally:
            monkeypatch.delenv("GIGAINT_CHECK_INVARIANTS")
            load_config.cache_clear()


# ---------------------------------------------------------------------------
# evaluate_or_raise
# ---------------------------------------------------------------------------

class TestEvaluateOrRaise:
    def test_value(self):
        assert evaluate_or_raise("multiply", "-3", "4") == from_int(-12)

    @pytest.mark.parametrize(
        "call, exc",
        [
            (("divide", "1", "0"), DivisionByZeroError),
            (("log", "-1", "10"), MathDomainError),
            (("add", "x", "1"), MalformedLiteralError),
            (("add", "1"), ArityError),
            (("frobnicate", "1"), UnknownOperationError),
            (("add", 1.5, 2), OperandTypeError),
        ],
    )
    def test_typed_errors(self, call, exc):
        with pytest.raises(exc):
            evaluate_or_raise(*call)

    def test_invariant_error_keeps_violations(self, monkeypatch):
        def broken(a: BigInt, b: BigInt) -> BigInt:
            raise InvariantError(["no_negative_zero", "decimal_length_matches"])

        monkeypatch.setitem(engine._DISPATCH, Operation.MULTIPLY, (2, broken))
        with pytest.raises(InvariantError) as exc:
            evaluate_or_raise("multiply", "1", "2")
        assert exc.value.violations == ["no_negative_zero", "decimal_length_matches"]


def test_coerce_operand() -> None:
    n = from_int(3)
    assert coerce_operand(n) is n
    assert coerce_operand(-4) == from_int(-4)
    assert coerce_operand(" -4 ") == from_int(-4)
    with pytest.raises(OperandTypeError):
        coerce_operand(True)
    with pytest.raises(TypeError):
        coerce_operand(2.0)


def test_op_result_defaults() -> None:
    r = OpResult(ok=True, value=from_int(1))
    assert r.error_kind is None
    assert r.message is None
    assert r.violations == ()
