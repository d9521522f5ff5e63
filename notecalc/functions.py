import math
from dataclasses import dataclass
from typing import Callable

UnaryFunc = Callable[[float], float]


@dataclass(frozen=True)
class Function:
    name: str
    fn: UnaryFunc

    def __call__(self, arg: float) -> float:
        return self.fn(arg)

    def __str__(self) -> str:
        return self.name


FUNCTIONS: dict[str, Function] = dict()

CONSTANTS: dict[str, float] = {
    "e": math.e,
    "pi": math.pi,
    "tau": math.tau,
}


def register_function(name: str, *aliases: str):
    """Adds a unary float function to the table under ``name`` and every alias.

    ``math`` signals domain errors with ValueError where IEEE-754 produces NaN, so
    the registered function returns NaN instead of raising.
    """

    def decorator(fn: UnaryFunc) -> UnaryFunc:
        def decorated(arg: float) -> float:
            try:
                return fn(arg)
            except ValueError:
                return math.nan

        function = Function(name=name, fn=decorated)
        for alias in (name, *aliases):
            FUNCTIONS[alias] = function
        return decorated

    return decorator


def divide(a: float, b: float) -> float:
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x.is_integer() and x % 2 == 1


def power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        sign = -1.0 if base < 0 and _is_odd_integer(exponent) else 1.0
        return sign * math.inf
    except ValueError:
        if base == 0.0:
            # zero to a negative power
            sign = math.copysign(1.0, base) if _is_odd_integer(exponent) else 1.0
            return sign * math.inf
        return math.nan


def _log(fn: UnaryFunc, x: float) -> float:
    return -math.inf if x == 0.0 else fn(x)


@register_function("sin")
def sin_(x: float) -> float:
    return math.sin(x)


@register_function("cos")
def cos_(x: float) -> float:
    return math.cos(x)


@register_function("tan")
def tan_(x: float) -> float:
    return math.tan(x)


@register_function("sec")
def sec_(x: float) -> float:
    return divide(1.0, math.cos(x))


@register_function("csc")
def csc_(x: float) -> float:
    return divide(1.0, math.sin(x))


@register_function("cot")
def cot_(x: float) -> float:
    return divide(1.0, math.tan(x))


@register_function("asin", "arcsin")
def asin_(x: float) -> float:
    return math.asin(x)


@register_function("acos", "arccos")
def acos_(x: float) -> float:
    return math.acos(x)


@register_function("atan", "arctan")
def atan_(x: float) -> float:
    return math.atan(x)


@register_function("asec", "arcsec")
def asec_(x: float) -> float:
    return math.acos(divide(1.0, x))


@register_function("acsc", "arccsc")
def acsc_(x: float) -> float:
    return math.asin(divide(1.0, x))


@register_function("acot", "arccot")
def acot_(x: float) -> float:
    return math.atan(divide(1.0, x))


@register_function("ln", "loge")
def ln_(x: float) -> float:
    return _log(math.log, x)


@register_function("log", "log10")
def log_(x: float) -> float:
    return _log(math.log10, x)


@register_function("lb", "log2")
def lb_(x: float) -> float:
    return _log(math.log2, x)


@register_function("sqrt")
def sqrt_(x: float) -> float:
    return math.sqrt(x)


@register_function("cbrt")
def cbrt_(x: float) -> float:
    return math.cbrt(x)


@register_function("abs")
def abs_(x: float) -> float:
    return math.fabs(x)
