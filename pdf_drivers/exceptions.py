"""
PDF driver exceptions

Everything raised by the driver layer derives from PdfError so callers
can handle configuration problems and engine failures in one place.
"""


class PdfError(Exception):
    """Base exception for all PDF driver errors."""
    pass


class ConfigurationError(PdfError):
    """
    Raised when a driver cannot be resolved from the configuration.

    Example:
        No default driver is configured and none was requested, or the
        requested driver has no entry in settings.PDF['drivers'].
    """
    pass


class UnknownOperationError(PdfError, AttributeError):
    """
    Raised when a method name cannot be resolved on a driver.

    Subclasses AttributeError so hasattr() and getattr() with a default
    keep working on driver instances.
    """

    def __init__(self, name, alternatives=()):
        alternatives = tuple(alternatives)
        tried = ", ".join(alternatives) or "none"
        super().__init__(
            f"PDF driver method '{name}' could not be determined "
            f"(alternatives tried: {tried})"
        )
        # set after AttributeError.__init__, which resets name
        self.name = name
        self.alternatives = alternatives
