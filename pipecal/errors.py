from __future__ import annotations


class PipecalError(Exception):
    """Base class for every failure the correction run can report."""


class InputNotFound(PipecalError, FileNotFoundError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"File not found: {path}")


class ParseError(PipecalError, ValueError):
    """A scan line holds a token that is not a finite number."""

    def __init__(self, token: str, line: int | None = None, path=None):
        self.token = token
        self.line = line
        self.path = path
        where = f" on line {line}" if line is not None else ""
        src = f" in {path}" if path is not None else ""
        super().__init__(f"Cannot parse {token!r} as a number{where}{src}")


class ShapeMismatch(PipecalError, ValueError):
    def __init__(self, expected: int, actual: int, line: int | None = None, detail: str | None = None):
        self.expected = expected
        self.actual = actual
        self.line = line
        if detail is None:
            where = f"line {line}" if line is not None else "row"
            detail = f"{where} has {actual} values, expected {expected} (one per probe)"
        super().__init__(detail)


class DegenerateFit(PipecalError, ValueError):
    """The per-axis regression has no usable denominator or non-finite data."""


class EmptyInput(PipecalError, ValueError):
    def __init__(self, msg: str = "no data"):
        super().__init__(msg)
