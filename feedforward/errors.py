"""Errors raised by matrices and neural networks."""


class NetworkError(Exception):
    """Base class for every error raised by this package."""


class CellOutOfBounds(NetworkError):
    def __init__(self, row, column, rows, columns):
        self.row = row
        self.column = column
        self.rows = rows
        self.columns = columns
        super().__init__(
            f"Cell ({row}, {column}) is not part of the {rows}x{columns} matrix."
        )


class DimensionMismatch(NetworkError):
    """Two shapes (or a shape and a data length) that must agree do not."""

    def __init__(self, expected, actual, message=None):
        self.expected = expected
        self.actual = actual
        if message is None:
            message = f"Expected dimensions {expected}, got {actual}."
        super().__init__(message)


class DimensionsTooLarge(NetworkError):
    def __init__(self, rows, columns, max_length):
        self.rows = rows
        self.columns = columns
        self.max_length = max_length
        super().__init__(
            f"A {rows}x{columns} matrix exceeds the maximum of {max_length} cells."
        )


class EmptyNetwork(NetworkError):
    def __init__(self):
        super().__init__("A neural network needs at least one layer.")


class BuilderFinalized(NetworkError):
    def __init__(self):
        super().__init__(
            "This builder already produced a neural network and cannot be reused."
        )
