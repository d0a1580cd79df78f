from __future__ import annotations


class UserLookupError(Exception):
    """Base class for failures raised while resolving users and balances."""


class ValueRequiredButAbsent(UserLookupError, ValueError):
    """An optional value was unwrapped while empty."""

    def __init__(self, message: str = "No value present") -> None:
        super().__init__(message)


class NoSuchElement(UserLookupError, LookupError):
    """
    Nothing could be selected.

    Raised for aggregations over an empty collection and when every
    provider in a fallback chain came back empty.
    """


class NoUserProvided(UserLookupError, RuntimeError):
    """The single provider consulted did not return a user."""

    def __init__(self, message: str = "No User provided!") -> None:
        super().__init__(message)
