import string

from notecalc.errors import InvalidError


def parse_num(text: str, pos: int = 0, code: str = "") -> float:
    """Reads a number token such as ``12``, ``12.5``, ``.5`` or ``12.``

    Only ASCII digits and a single decimal point are accepted. ``pos`` is the offset
    of the token in ``code`` and is used for error reporting only.
    """
    int_part, dot, frac_part = text.partition(".")
    if not int_part and not frac_part:
        raise InvalidError(f"No digits in number {text!r}", error_char_idx=pos, code=code)

    value = 0.0
    for offset, char in enumerate(int_part):
        if char not in string.digits:
            raise InvalidError(f"Unexpected {char!r} in number", error_char_idx=pos + offset, code=code)
        value = value * 10 + int(char)

    frac_start = len(int_part) + len(dot)
    for position, char in enumerate(frac_part, start=1):
        if char not in string.digits:
            errmsg = "Second decimal point in number" if char == "." else f"Unexpected {char!r} in number"
            raise InvalidError(errmsg, error_char_idx=pos + frac_start + position - 1, code=code)
        value += int(char) * 10.0 ** -position
    return value
