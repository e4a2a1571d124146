"""src/valuri/exceptions.py

Valuri Exceptions hierarchy.
"""


class ValuriError(Exception):
    """Base exception for all Valuri errors."""


class InvalidUriError(ValuriError, ValueError):
    """
    Raised when a string cannot be decomposed into URI components.

    The offending input is kept on ``uri`` for diagnostic display.
    """

    def __init__(self, uri: object, message: str = ""):
        self.uri = uri
        super().__init__(message or f"Unable to parse {uri!r} as a valid URI")


class InvalidComponentError(ValuriError, ValueError):
    """Unknown URI component name."""

    def __init__(self, name: object):
        self.name = name
        super().__init__(f"Unknown URI component: {name!r}")
