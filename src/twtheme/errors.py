"""
Error types for twtheme.

Derivation itself never raises for well-typed input; errors only surface
at the boundaries (validating a raw theme description, handing a bundle
to a host).
"""


class TwThemeError(Exception):
    """Base exception for all twtheme errors."""

    def __init__(self, message: str, location: str | None = None):
        self.message = message
        self.location = location
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with the offending location if available."""
        if self.location:
            return f"{self.location}: {self.message}"
        return self.message


class ThemeDescriptionError(TwThemeError):
    """
    Raised when a raw theme description cannot be validated.

    Examples:
    - A color group that is not a mapping
    - A non-numeric font_size.base
    """

    pass


class HostRegistrationError(TwThemeError):
    """
    Raised when a host cannot accept a registration.

    Example:
    - A utility family whose value type tag the host does not support
      (StylesheetHost accepts "color" only by default)
    """

    pass
