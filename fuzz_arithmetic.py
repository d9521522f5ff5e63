import math
import random
import re
import string
import warnings

from notecalc.errors import CalcError
from notecalc.runtime import evaluate

warnings.filterwarnings("ignore")


def eval_py(code: str) -> float | str:
    try:
        return eval(code)
    except Exception as e:
        return str(e)


def eval_my(code: str) -> float | str:
    try:
        return evaluate(code)
    except CalcError as e:
        return str(e)


if __name__ == "__main__":
    alphabet = string.digits + ".()+-*/ "

    def generate(length: int) -> str:
        return "".join(random.choices(alphabet, k=length))

    while True:
        code = generate(10)

        if re.findall(r"\*\s*\*", code):
            continue  # avoid generating powers (10**4), python's unary minus binds looser there

        if re.findall(r"/\s*/", code):
            continue  # avoid generating int devision (10 // 3)

        res_py = eval_py(code)
        if isinstance(res_py, str):
            continue  # implicit multiplication and 1/0 are valid here but not in python

        res_my = eval_my(code)
        if isinstance(res_my, float) and math.isclose(res_my, float(res_py)):
            continue
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
