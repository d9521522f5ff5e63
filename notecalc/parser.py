import enum
from dataclasses import dataclass
from typing import Optional

from notecalc.errors import InvalidError, UnrecognizedError
from notecalc.functions import CONSTANTS, FUNCTIONS, Function
from notecalc.lexer import Group, Lexeme, Token, TokenType
from notecalc.literals import parse_num
from notecalc.utils import DEFAULT_MAX_DEPTH, PrintableEnum


class BinaryOperator(PrintableEnum):
    ADD = enum.auto()
    SUB = enum.auto()
    MUL = enum.auto()
    DIV = enum.auto()
    POW = enum.auto()


@dataclass
class BinaryOperation:
    operator: BinaryOperator
    left: "Expression"
    right: "Expression"


class UnaryOperator(PrintableEnum):
    NEG = enum.auto()
    POS = enum.auto()


@dataclass
class UnaryOperation:
    operator: UnaryOperator | Function
    operand: "Expression"


Expression = float | BinaryOperation | UnaryOperation


SYMBOL_OPERATORS = {
    "+": BinaryOperator.ADD,
    "-": BinaryOperator.SUB,
    "*": BinaryOperator.MUL,
    "/": BinaryOperator.DIV,
    "^": BinaryOperator.POW,
    "**": BinaryOperator.POW,
}

# (left, right); right < left makes an operator right-associative
BINDING_POWERS = {
    BinaryOperator.ADD: (1, 2),
    BinaryOperator.SUB: (1, 2),
    BinaryOperator.MUL: (5, 6),
    BinaryOperator.DIV: (5, 6),
    BinaryOperator.POW: (8, 7),
}

# bare function arguments and implicit multiplication operands: tighter than + -, looser than * /
ARGUMENT_BP = 4
# unary + -: tighter than * /, looser than ^
PREFIX_BP = 7

PREFIX_OPERATORS = {
    "+": UnaryOperator.POS,
    "-": UnaryOperator.NEG,
}
BINARY_ONLY_SYMBOLS = {"*", "/", "^"}


class _LexemeStream:
    """Peekable view over one nesting level of lexemes"""

    def __init__(self, lexemes: list[Lexeme], end_pos: int) -> None:
        self.lexemes = lexemes
        self.i = 0
        self.end_pos = end_pos  # where "unexpected end" errors point

    def peek(self) -> Optional[Lexeme]:
        return self.lexemes[self.i] if self.i < len(self.lexemes) else None

    def next(self) -> Optional[Lexeme]:
        lexeme = self.peek()
        if lexeme is not None:
            self.i += 1
        return lexeme


class Parser:
    def __init__(self, code: str = "", max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self.code = code
        self.max_depth = max_depth
        self.depth = 0

    def parse(self, lexemes: list[Lexeme]) -> Expression:
        return self.parse_bp(_LexemeStream(lexemes, end_pos=len(self.code)), min_bp=0)

    def parse_bp(self, stream: _LexemeStream, min_bp: int) -> Expression:
        if self.depth >= self.max_depth:
            lexeme = stream.peek()
            raise InvalidError(
                f"Expression nested deeper than {self.max_depth}",
                error_char_idx=stream.end_pos if lexeme is None else lexeme.pos,
                code=self.code,
            )
        self.depth += 1
        try:
            left = self.parse_atom(stream)
            while True:
                lexeme = stream.peek()
                if lexeme is None:
                    break
                elif isinstance(lexeme, Token) and lexeme.type is TokenType.SYM:
                    operator = SYMBOL_OPERATORS[lexeme.text]
                    left_bp, right_bp = BINDING_POWERS[operator]
                    if left_bp < min_bp:
                        break
                    stream.next()
                    right = self.parse_bp(stream, right_bp)
                    left = BinaryOperation(operator=operator, left=left, right=right)
                else:
                    # implicit multiplication does not check min_bp, so it is never left to an outer caller
                    left = BinaryOperation(operator=BinaryOperator.MUL, left=left, right=self.parse_arg(stream))
            return left
        finally:
            self.depth -= 1

    def parse_arg(self, stream: _LexemeStream) -> Expression:
        if isinstance(stream.peek(), Group):
            return self.parse_atom(stream)
        return self.parse_bp(stream, ARGUMENT_BP)

    def parse_atom(self, stream: _LexemeStream) -> Expression:
        lexeme = stream.next()
        if lexeme is None:
            raise UnrecognizedError("Unexpected end of expression", error_char_idx=stream.end_pos, code=self.code)
        elif isinstance(lexeme, Group):
            return self.parse_bp(_LexemeStream(lexeme.inner, end_pos=lexeme.end_pos), min_bp=0)
        elif lexeme.type is TokenType.NUM:
            return parse_num(lexeme.text, pos=lexeme.pos, code=self.code)
        elif lexeme.type is TokenType.ID:
            if lexeme.text in FUNCTIONS:
                return UnaryOperation(operator=FUNCTIONS[lexeme.text], operand=self.parse_arg(stream))
            elif lexeme.text in CONSTANTS:
                return CONSTANTS[lexeme.text]
            raise UnrecognizedError(f"Unknown identifier {lexeme.text!r}", error_char_idx=lexeme.pos, code=self.code)
        elif lexeme.text in PREFIX_OPERATORS:
            return UnaryOperation(operator=PREFIX_OPERATORS[lexeme.text], operand=self.parse_bp(stream, PREFIX_BP))
        elif lexeme.text in BINARY_ONLY_SYMBOLS:
            raise InvalidError(f"Operand expected, found {lexeme.text!r}", error_char_idx=lexeme.pos, code=self.code)
        else:
            raise UnrecognizedError(f"Unexpected {lexeme.text!r}", error_char_idx=lexeme.pos, code=self.code)


def parse(lexemes: list[Lexeme], code: str = "", max_depth: int = DEFAULT_MAX_DEPTH) -> Expression:
    """Builds the expression tree; ``code`` is the lexed text, used in error messages"""
    return Parser(code=code, max_depth=max_depth).parse(lexemes)
