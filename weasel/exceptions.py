class WeaselError(Exception):
    """Base for all weasel exceptions."""

    pass


# Fraction family
class FractionError(WeaselError, ValueError):
    """Invalid probability value."""

    pass


class FractionRangeError(FractionError):
    """Raised when a value lies outside the [0.0, 1.0] range."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"{value} is not in the [0.0, 1.0] range")


class FractionParseError(FractionError):
    """Raised when text cannot be interpreted as a real number."""

    def __init__(self, text: object):
        self.text = text
        super().__init__(f"failed parsing into a float: {text!r}")


# Engine construction
class ConfigurationError(WeaselError, ValueError):
    """Breeder configuration failures (empty alphabet, unknown fitness, ...)."""

    pass


# Usage errors
class EngineBusyError(WeaselError, RuntimeError):
    """Raised when a breeder is used while a generation sequence holds it."""

    pass
