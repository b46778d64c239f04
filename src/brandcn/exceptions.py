"""Errors raised while resolving and copying logos.

Each error also derives from the builtin it refines (``ValueError`` for bad
names, ``OSError`` for file system trouble) so callers can catch either.
The CLI prints ``str(error)``; ``details`` carries extra context for logs.
"""


class BrandcnError(Exception):
    """Base class for brandcn errors."""

    def __init__(self, message: str, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if not self.details:
            return self.message
        return f"{self.message}\n  Details: {self.details}"


class LogoNameError(BrandcnError, ValueError):
    """Raised when a logo name is malformed."""

    pass


class LogoNotFoundError(BrandcnError, LookupError):
    """Raised when a logo doesn't exist in the library."""

    pass


class StoreReadError(BrandcnError, OSError):
    """Raised when the library directory cannot be listed."""

    pass


class LogoCopyError(BrandcnError, OSError):
    """Raised when a logo cannot be written to the target directory."""

    pass
