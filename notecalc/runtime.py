import logging
import operator
from typing import Callable

from notecalc.functions import Function, divide, power
from notecalc.lexer import lex, unlex
from notecalc.parser import BinaryOperation, BinaryOperator, Expression, UnaryOperation, UnaryOperator, parse
from notecalc.utils import DEFAULT_MAX_DEPTH

logger = logging.getLogger(__name__)


def evaluate(code: str, max_depth: int = DEFAULT_MAX_DEPTH) -> float:
    """Lexes, parses and evaluates ``code``.

    Raises UnrecognizedError or InvalidError; arithmetic never raises (``1/0`` is ``inf``).
    """
    lexemes = lex(code, max_depth=max_depth)
    logger.debug("Lexed %r as %s", code, unlex(lexemes))
    expression = parse(lexemes, code=code, max_depth=max_depth)
    logger.debug("Parsed %r as %s", code, expression)
    return evaluate_expression(expression)


BinaryOperationImpl = Callable[[float, float], float]
UnaryOperationImpl = Callable[[float], float]

binary_impls: dict[BinaryOperator, BinaryOperationImpl] = {
    BinaryOperator.ADD: operator.add,
    BinaryOperator.SUB: operator.sub,
    BinaryOperator.MUL: operator.mul,
    BinaryOperator.DIV: divide,
    BinaryOperator.POW: power,
}

unary_impls: dict[UnaryOperator, UnaryOperationImpl] = {
    UnaryOperator.POS: operator.pos,
    UnaryOperator.NEG: operator.neg,
}


def evaluate_expression(expression: Expression) -> float:
    # left operands are walked in a loop: "1+2+...+n" parses into a left-deep tree of any length,
    # while right operands and unary operands are as deep as the parser's depth limit allows
    pending: list[BinaryOperation] = []
    while isinstance(expression, BinaryOperation):
        pending.append(expression)
        expression = expression.left

    if isinstance(expression, float):
        result = expression
    elif isinstance(expression, UnaryOperation):
        operand = evaluate_expression(expression.operand)
        if isinstance(expression.operator, Function):
            result = expression.operator(operand)
        else:
            result = unary_impls[expression.operator](operand)
    else:
        raise TypeError(f"Unexpected expression type: {expression!r}")

    for binary_operation in reversed(pending):
        right_res = evaluate_expression(binary_operation.right)
        result = binary_impls[binary_operation.operator](result, right_res)
    return result
