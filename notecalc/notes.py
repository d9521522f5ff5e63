"""Glue for note-taking hosts: picks the expression before the cursor and appends its result.

A line such as ``rent: 1200/3`` with the cursor at its end becomes ``rent: 1200/3 = 400``.
"""
import math
from decimal import Decimal
from typing import Optional

from notecalc.errors import CalcError
from notecalc.runtime import evaluate

SPAN_DELIMITERS = (":", "=", "\n")


def format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    elif math.isinf(value):
        return "inf" if value > 0 else "-inf"
    # shortest round-tripping digits, but never in exponent notation, and no ".0" on whole numbers
    return format(Decimal(repr(value)), "f").removesuffix(".0")


def format_result(code: str) -> str:
    try:
        return format_number(evaluate(code))
    except CalcError as e:
        return e.kind.message


def expression_span(text: str, cursor: int, anchor: Optional[int] = None) -> tuple[int, int]:
    if anchor is None or anchor == cursor:
        start = max(text.rfind(delimiter, 0, cursor) for delimiter in SPAN_DELIMITERS) + 1
        return start, cursor
    return min(cursor, anchor), max(cursor, anchor)


def annotate(text: str, cursor: int, anchor: Optional[int] = None) -> tuple[str, int]:
    """Returns ``text`` with `` = <result>`` inserted after the evaluated span, and the new cursor"""
    start, end = expression_span(text, cursor, anchor)
    insertion = " = " + format_result(text[start:end])
    return text[:end] + insertion + text[end:], end + len(insertion)
