"""
Exception types raised by the minefield engine.
"""


class MinefieldError(Exception):
    """Base class for all engine errors."""


class ConfigurationError(MinefieldError, ValueError):
    """Board parameters or call order that the engine cannot honour."""


class InvalidDimensionsError(ConfigurationError):
    """Grid rows or columns are not positive."""


class OutOfBoundsError(MinefieldError, IndexError):
    """A coordinate lies outside the grid."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        super().__init__(
            f"Position ({row}, {col}) is outside a {rows}x{cols} grid"
        )
        self.row = row
        self.col = col
