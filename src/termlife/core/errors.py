"""Errors raised by the Game of Life core."""


class InvalidDimension(ValueError):
    """Raised when a grid is configured with a non-positive width or height."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        super().__init__(f"Grid dimensions must be positive, got {width}x{height}")
