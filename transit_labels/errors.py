"""Exceptions raised by the normalizer and the layers around it."""


class ConfigurationError(Exception):
    """Raised when the static agency tables are incomplete (e.g. a route has no color).

    This is a data-completeness bug: callers must not recover from it.
    """

    def __init__(self, message: str, route=None):
        super().__init__(message)
        self.route = route


class NormalizationError(Exception):
    """Raised when a caller request cannot be satisfied."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
