"""
Domain Exceptions - Errors raised while constructing domain objects.
"""


class InvalidArgumentError(ValueError):
    """Raised when a required field is missing or empty."""
