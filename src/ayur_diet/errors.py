"""Error types raised by the diet planner."""


class AyurDietError(Exception):
    """Base class for diet planner errors."""


class InvalidProfileError(AyurDietError, ValueError):
    """Raised when a patient profile violates the input contract."""


class InvalidCatalogueError(AyurDietError, ValueError):
    """Raised when a food catalogue row cannot be parsed."""
