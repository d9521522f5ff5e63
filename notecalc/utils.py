import enum

DEFAULT_MAX_DEPTH = 250


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


def excerpt(code: str, idx: int, width: int = 10) -> list[str]:
    """Two lines: a window of ``code`` around ``idx`` and a caret pointing at it"""
    start_idx = max(0, idx - width)
    ellipsis_pre = start_idx > 0
    end_idx = min(len(code), idx + width)
    ellipsis_post = end_idx < len(code)
    return [
        ("..." if ellipsis_pre else "") + code[start_idx:end_idx] + ("..." if ellipsis_post else ""),
        " " * (idx - start_idx + (3 if ellipsis_pre else 0)) + "^",
    ]
