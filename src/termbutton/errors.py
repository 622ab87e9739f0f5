"""Errors raised while building widget options."""


class InvalidDimension(ValueError):
    """A widget dimension is below its allowed minimum.

    Attributes:
        dimension: Name of the offending dimension ("height" or "width")
        value: The value that was supplied
        minimum: Smallest accepted value
    """

    def __init__(self, dimension: str, value: int, minimum: int):
        self.dimension = dimension
        self.value = value
        self.minimum = minimum
        super().__init__(
            f"invalid {dimension} {value}, must be {minimum} <= {dimension}"
        )
