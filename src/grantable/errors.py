"""Grantable exception definitions.

Custom exception hierarchy for the reward descriptor language.
"""


class GrantableError(ValueError):
    """Base exception for grantable parsing and registration.

    Attributes:
        token: The offending token or field, if known.
    """

    def __init__(self, message: str, token: str | None = None) -> None:
        super().__init__(message)
        self.token = token


class MalformedGroupError(GrantableError):
    """Unmatched or misplaced parenthesis in a descriptor."""

    pass


class InvalidValueError(GrantableError):
    """Token body does not satisfy its kind's grammar."""

    pass


class UnknownKindError(InvalidValueError):
    """No registered kind matched and the item grammar failed as well."""

    pass


class EmptyInputError(GrantableError):
    """Missing or empty input where a value is required."""

    pass


class RegistrationError(GrantableError):
    """Invalid symbol or prefix metadata for a grantable kind."""

    pass
