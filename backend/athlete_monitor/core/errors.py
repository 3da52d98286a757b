"""Domain error taxonomy.

Services and the engine raise these; ``main`` maps them to HTTP responses.
"""


class DomainError(Exception):
    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    status_code = 400


class NotFoundError(DomainError):
    status_code = 404


class ConflictError(DomainError):
    status_code = 409


class ConfigurationGapError(NotFoundError):
    """No criteria weights are configured for a position."""

    def __init__(self, position: str) -> None:
        position = getattr(position, "value", position)
        super().__init__(f"No criteria weights configured for position {position}.")
        self.position = position


class MalformedRuleError(DomainError):
    """A trigger condition could not be parsed.

    Recovered inside the rule engine; never reaches the API boundary.
    """
