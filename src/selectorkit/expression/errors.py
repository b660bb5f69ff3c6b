"""Builder expression error types."""


class ExpressionError(Exception):
    """Raised when a builder expression is malformed or names an unknown fragment.

    ``line`` and ``column`` are 1-based and point into the expression
    source: at the offending character or token for syntax errors, and at
    the fragment name for unknown fragments. Both are None when the
    position is unknown.
    """

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)
