"""Exceptions raised while classifying and fixing test names."""


class NamingError(Exception):
    """Base exception for naming convention errors."""

    pass


class InvalidNameError(NamingError, ValueError):
    """Raised when a name token is empty or whitespace-only."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Test name must not be blank: {name!r}")


class UnfixableNameError(NamingError):
    """Raised when no deterministic correction exists for a name."""

    def __init__(self, name: str, category: str, reason: str | None = None):
        self.name = name
        self.category = category
        message = f"Cannot fix '{name}' ({category})"
        if reason:
            message += f": {reason}"
        super().__init__(message)
