"""Color parsing errors."""


class ColorError(Exception):
    """Base class for color input errors."""
    pass


class ParseError(ColorError):
    """Input is not a valid hex color or oklch() string."""
    pass
