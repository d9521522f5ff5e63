import enum
from dataclasses import dataclass, field
from typing import Callable, Optional

from notecalc.errors import InvalidError, UnrecognizedError
from notecalc.utils import DEFAULT_MAX_DEPTH, PrintableEnum


class TokenType(PrintableEnum):
    NUM = enum.auto()
    ID = enum.auto()
    SYM = enum.auto()


@dataclass
class Token:
    type: TokenType
    text: str
    pos: int = field(default=0, compare=False)

    def __str__(self) -> str:
        return f"<{self.type}>{self.text}"


@dataclass
class Group:
    """One parenthesized span; ``pos`` and ``end_pos`` are the indices of its brackets"""

    inner: list["Lexeme"]
    pos: int = field(default=0, compare=False)
    end_pos: int = field(default=0, compare=False)

    def __str__(self) -> str:
        return "(" + " ".join(str(lexeme) for lexeme in self.inner) + ")"


Lexeme = Token | Group


def _is_valid_in_number(s: str) -> bool:
    # letters are let through on purpose, the literal reader rejects them
    return s.isalnum() or s == "."


def _is_valid_in_identifier(s: str) -> bool:
    return s.isalnum()


SINGLE_CHAR_SYMBOLS = {"+", "-", "/", "^"}


def lex(code: str, max_depth: int = DEFAULT_MAX_DEPTH) -> list[Lexeme]:
    lexemes, _ = _lex_group(code, 0, open_idx=None, depth=0, max_depth=max_depth)
    return lexemes


def _scan(code: str, i: int, is_valid: Callable[[str], bool]) -> int:
    while i < len(code) and is_valid(code[i]):
        i += 1
    return i


def _lex_group(
    code: str, i: int, open_idx: Optional[int], depth: int, max_depth: int
) -> tuple[list[Lexeme], int]:
    """Lexes until the bracket opened at ``open_idx`` is closed, or until the end of code at top level.

    Returns lexemes of this nesting level and the index right after the closing bracket.
    """
    terminator = None if open_idx is None else ")"
    lexemes: list[Lexeme] = []
    while i < len(code):
        char = code[i]
        if char.isalpha():
            end_idx = _scan(code, i + 1, _is_valid_in_identifier)
            lexemes.append(Token(type=TokenType.ID, text=code[i:end_idx], pos=i))
            i = end_idx
            continue
        elif char.isnumeric() or char == ".":
            end_idx = _scan(code, i + 1, _is_valid_in_number)
            lexemes.append(Token(type=TokenType.NUM, text=code[i:end_idx], pos=i))
            i = end_idx
            continue
        elif char == "*":
            if code.startswith("**", i):
                lexemes.append(Token(type=TokenType.SYM, text="**", pos=i))
                i += 1
            else:
                lexemes.append(Token(type=TokenType.SYM, text="*", pos=i))
        elif char in SINGLE_CHAR_SYMBOLS:
            lexemes.append(Token(type=TokenType.SYM, text=char, pos=i))
        elif char == "(":
            if depth >= max_depth:
                raise InvalidError(f"Brackets nested deeper than {max_depth}", error_char_idx=i, code=code)
            inner, end_idx = _lex_group(code, i + 1, open_idx=i, depth=depth + 1, max_depth=max_depth)
            lexemes.append(Group(inner=inner, pos=i, end_pos=end_idx - 1))
            i = end_idx
            continue
        elif char == terminator:
            return lexemes, i + 1
        elif char.isspace():
            pass
        else:
            raise UnrecognizedError(f"Unexpected character: {char!r}", error_char_idx=i, code=code)
        i += 1

    if open_idx is not None:
        raise UnrecognizedError("Unclosed bracket", error_char_idx=open_idx, code=code)
    return lexemes, i


def unlex(lexemes: list[Lexeme]) -> str:
    result = []
    for lexeme in lexemes:
        if isinstance(lexeme, Group):
            result.append("(" + unlex(lexeme.inner) + ")")
        else:
            result.append(lexeme.text)
    return " ".join(result)
