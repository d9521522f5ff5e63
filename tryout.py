from notecalc.errors import CalcError
from notecalc.lexer import lex, unlex
from notecalc.notes import format_number
from notecalc.parser import parse
from notecalc.runtime import evaluate_expression

for code in [
    "5",
    "-1",
    "1 + 1",
    "1 + -1",
    "4 + 6 * 3",
    "(4+6) * 3",
    "80225/+2",
    "2^3^2",
    "2**3",
    "-2^2",
    "2 3",
    "2(3+4)",
    "2 pi",
    "sin 30+10",
    "sin 2*3",
    "2^3 4",
    "sqrt(1 + 3) cbrt 27",
    "1/0",
    "1.2.3",
    "(1 + 2",
    "foo(1)",
    "*3",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    try:
        lexemes = lex(code)
        print(f"lexemes: {unlex(lexemes)}")
        expression = parse(lexemes, code=code)
        print(f"ast: {expression}")
        print(f"result: {format_number(evaluate_expression(expression))}")
    except CalcError as e:
        print(e)
