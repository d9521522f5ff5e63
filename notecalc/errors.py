import enum
from dataclasses import dataclass
from typing import ClassVar

from notecalc.utils import PrintableEnum, excerpt


class ErrorKind(PrintableEnum):
    UNRECOGNIZED = enum.auto()
    INVALID = enum.auto()

    @property
    def message(self) -> str:
        return {
            ErrorKind.UNRECOGNIZED: "<unrecognized operator>",
            ErrorKind.INVALID: "<invalid expression>",
        }[self]


@dataclass(eq=False)
class CalcError(Exception):
    errmsg: str
    error_char_idx: int
    code: str = ""

    kind: ClassVar[ErrorKind]

    def __str__(self) -> str:
        lines = [f"[{self.kind}] {self.errmsg}"]
        if self.code:
            lines.extend(excerpt(self.code, self.error_char_idx))
        return "\n".join(lines)


class UnrecognizedError(CalcError):
    """Unknown character or identifier, or an unexpected lexeme where an operand should start"""

    kind = ErrorKind.UNRECOGNIZED


class InvalidError(CalcError):
    """Malformed number literal, binary-only operator in operand position, or nesting over the limit"""

    kind = ErrorKind.INVALID
