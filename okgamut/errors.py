"""Color conversion errors."""


class ColorError(Exception):
    """Base class for okgamut errors."""
    pass


class InvalidColorError(ColorError, ValueError):
    """OKLCH component outside its valid range."""

    def __init__(self, message: str, name: str, value: float):
        super().__init__(f"{message} (got {name}={value!r})")
        self.name = name
        self.value = value
