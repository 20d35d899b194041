"""
Custom exceptions for the application.
"""


class LingoDeckException(Exception):
    """Base exception for all LingoDeck application exceptions."""
    pass


class ValidationError(LingoDeckException):
    """Raised when validation fails."""
    pass


class InvalidLevelError(LingoDeckException, ValueError):
    """Raised when a card level below 1 (or not an integer) reaches the scheduler."""
    pass


class NotFoundError(LingoDeckException):
    """Raised when a requested resource is not found."""
    pass


class ConflictError(LingoDeckException):
    """Raised when there's a conflict (e.g., a concurrent review of the same card)."""
    pass


class AuthorizationError(LingoDeckException):
    """Raised when a user may not access a resource."""
    pass


class UpstreamUnavailableError(LingoDeckException):
    """Raised when an external text service fails or times out."""
    pass
