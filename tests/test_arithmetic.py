import math

import pytest

from notecalc.errors import ErrorKind, InvalidError, UnrecognizedError
from notecalc.runtime import evaluate


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param("1", 1.0),
        pytest.param("-1", -1.0),
        pytest.param("+5", 5.0),
        pytest.param("--3", 3.0),
        pytest.param("1+2", 3.0),
        pytest.param("(1+2)", 3.0),
        pytest.param("-(1+2)", -3.0),
        pytest.param("(((1)))", 1.0),
        pytest.param("1 * 4 + 5", 9.0),
        pytest.param("1 + 4 * 5", 21.0),
        pytest.param("2+3*4", 14.0),
        pytest.param("(2+3)*4", 20.0),
        pytest.param("10 - 2 - 3", 5.0),
        pytest.param("10 / 5 / 2 / 2", 0.5),
        pytest.param("10 + 2 * (5 + 3 - 1)", 24.0),
        # power
        pytest.param("2^3^2", 512.0),
        pytest.param("2**3**2", 512.0),
        pytest.param("2 ** 3", 8.0),
        pytest.param("-2^2", -4.0),
        pytest.param("2^-1", 0.5),
        pytest.param("(-2)^2", 4.0),
        # implicit multiplication
        pytest.param("2 3", 6.0),
        pytest.param("2(3+4)", 14.0),
        pytest.param("(1+1)(2+2)", 8.0),
        pytest.param("2 3^2", 18.0),
        pytest.param("2+3 4", 14.0),
        # literals
        pytest.param("1.5*2", 3.0),
        pytest.param(".5+.5", 1.0),
        pytest.param("5.", 5.0),
        pytest.param("007", 7.0),
    ],
)
def test_eval_arithmetic(code: str, expected_ret_val: float) -> None:
    assert evaluate(code) == expected_ret_val


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        # the operand of an implicit multiplication is taken even where an explicit operator
        # of the same strength would have been left to the enclosing expression
        pytest.param("2^3 4", 2.0**12),
        pytest.param("8/2 2", 2.0),
        pytest.param("sqrt 4 sqrt 9", math.sqrt(12)),
    ],
)
def test_implicit_multiplication_ignores_min_binding_power(code: str, expected_ret_val: float) -> None:
    assert evaluate(code) == pytest.approx(expected_ret_val)


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param("sin 30+10", math.sin(30) + 10),
        pytest.param("sin 2*3", math.sin(6)),
        pytest.param("sin(30+10)", math.sin(40)),
        pytest.param("sin(pi/2)", 1.0),
        pytest.param("2 sin(0) + 1", 1.0),
        pytest.param("abs -3", 3.0),
        pytest.param("sqrt 16", 4.0),
        pytest.param("cbrt 27", 3.0),
        pytest.param("ln e", 1.0),
        pytest.param("log 1000", 3.0),
        pytest.param("log10 100", 2.0),
        pytest.param("lb 8", 3.0),
        pytest.param("2 pi", 2 * math.pi),
        pytest.param("tau/2", math.pi),
        pytest.param("arccos 1", 0.0),
    ],
)
def test_eval_functions(code: str, expected_ret_val: float) -> None:
    assert evaluate(code) == pytest.approx(expected_ret_val)


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param("1/0", math.inf),
        pytest.param("-1/0", -math.inf),
        pytest.param("2^1024", math.inf),
        pytest.param("0^-1", math.inf),
        pytest.param("csc 0", math.inf),
        pytest.param("ln 0", -math.inf),
    ],
)
def test_ieee_infinities(code: str, expected_ret_val: float) -> None:
    assert evaluate(code) == expected_ret_val


@pytest.mark.parametrize("code", ["0/0", "(-8)^(1/3)", "sqrt -1", "asin 2", "ln -1", "asec 0"])
def test_ieee_nan(code: str) -> None:
    assert math.isnan(evaluate(code))


@pytest.mark.parametrize(
    "code, error_cls",
    [
        pytest.param("foo(1)", UnrecognizedError),
        pytest.param("x", UnrecognizedError),
        pytest.param("Sin 0", UnrecognizedError),
        pytest.param("sin", UnrecognizedError),
        pytest.param("", UnrecognizedError),
        pytest.param("   ", UnrecognizedError),
        pytest.param("2+", UnrecognizedError),
        pytest.param("()", UnrecognizedError),
        pytest.param("(1+2", UnrecognizedError),
        pytest.param("1+2)", UnrecognizedError),
        pytest.param("2 # 3", UnrecognizedError),
        pytest.param("1\0", UnrecognizedError),
        pytest.param("**3", UnrecognizedError),
        pytest.param("*3", InvalidError),
        pytest.param("/3", InvalidError),
        pytest.param("^3", InvalidError),
        pytest.param("2 * * 3", InvalidError),
        pytest.param("1.2.3", InvalidError),
        pytest.param("2x", InvalidError),
        pytest.param("1e5", InvalidError),
        pytest.param(".", InvalidError),
    ],
)
def test_eval_errors(code: str, error_cls: type) -> None:
    with pytest.raises(error_cls):
        evaluate(code)


def test_error_kinds() -> None:
    with pytest.raises(UnrecognizedError) as exc_info:
        evaluate("foo(1)")
    assert exc_info.value.kind is ErrorKind.UNRECOGNIZED
    assert exc_info.value.kind.message == "<unrecognized operator>"

    with pytest.raises(InvalidError) as exc_info:
        evaluate("*3")
    assert exc_info.value.kind is ErrorKind.INVALID
    assert exc_info.value.kind.message == "<invalid expression>"


def test_nesting_limits() -> None:
    assert evaluate("(" * 200 + "1" + ")" * 200) == 1.0
    assert evaluate("-" * 200 + "1") == 1.0
    with pytest.raises(InvalidError):
        evaluate("(" * 300 + "1" + ")" * 300)
    with pytest.raises(InvalidError):
        evaluate("-" * 300 + "1")
    with pytest.raises(InvalidError):
        evaluate("2^" * 300 + "1")
    assert evaluate("-" * 8 + "1", max_depth=10) == 1.0
    with pytest.raises(InvalidError):
        evaluate("-" * 8 + "1", max_depth=5)


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param("+".join(["1"] * 20000), 20000.0),
        pytest.param("-".join(["1"] * 20000), -19998.0),
        pytest.param("*".join(["1"] * 20000), 1.0),
        pytest.param("(" + "+".join(["1"] * 5000) + ")^2", 25000000.0),
        pytest.param(" ".join(["1"] * 120), 1.0),
        pytest.param(" ".join(["2"] * 200), 2.0**200),
    ],
    ids=["sum", "difference", "product", "sum-in-group", "implicit-120", "implicit-200"],
)
def test_long_chains(code: str, expected_ret_val: float) -> None:
    assert evaluate(code) == expected_ret_val


def test_deterministic() -> None:
    code = "sin 30 + 2(3^2 - 1) / 7"
    assert len({evaluate(code) for _ in range(5)}) == 1
