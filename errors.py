"""Exception hierarchy for basin coding."""


class BasinCodingError(Exception):
    """Base class for basin coding errors."""


class ConfigurationError(BasinCodingError, ValueError):
    """Raised when an alphabet or precision setting cannot be used."""


class InputError(BasinCodingError, ValueError):
    """Raised when text handed to the decoder is not a valid encoding."""
