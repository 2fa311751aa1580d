"""Exceptions raised by the datasize library.

Constructors and parse entry points are the only fallible operations. Invalid
arguments surface as InvalidArgumentError (or one of its subclasses), malformed
text as ParseError. Both derive from ValueError so callers that only care about
"bad input" can catch that.
"""

###################################################################################
#                                                                                 #
#      IN ORDER TO AVOID CIRCULAR IMPORTS                                         #
#      THIS FILE SHOULD NOT IMPORT ANYTHING FROM THE DATASIZE LIBRARY             #
#                                                                                 #
###################################################################################


class DataSizeError(Exception):
    """Base exception for all datasize errors."""

    pass


class InvalidArgumentError(DataSizeError, ValueError):
    """Raised when an argument is missing or has an unacceptable value."""

    pass


class MissingArgumentError(InvalidArgumentError):
    """Raised when a required argument is None."""

    def __init__(self, argument_name: str):
        self.argument_name = argument_name
        super().__init__(f"Missing required argument: {argument_name}")


class NegativeValueError(InvalidArgumentError):
    """Raised when a data size would be constructed from a negative value."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Value must not be less than zero: {value}")


class UnknownUnitError(InvalidArgumentError):
    """Raised when a unit token does not name any known unit."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Unknown unit: {token!r}")


class UnknownLocaleError(InvalidArgumentError):
    """Raised when a locale identifier cannot be resolved."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Unknown locale: {identifier!r}")


class ParseError(DataSizeError, ValueError):
    """Raised when text cannot be parsed as a data size.

    Attributes:
        text: The complete input that failed to parse
        position: Offset of the first character that could not be consumed
        reason: Short description of what was expected at that offset
    """

    def __init__(self, text: str, position: int, reason: str = "unexpected input"):
        self.text = text
        self.position = position
        self.reason = reason
        super().__init__(f"{reason} at position {position}: {text!r}")
