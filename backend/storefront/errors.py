from typing import Optional


class StorefrontError(Exception):
    """Base class for errors surfaced to the shopper."""


class ApiError(StorefrontError):
    """The API could not be reached or answered with a non-2xx status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class AuthError(StorefrontError):
    pass


class RegistrationError(StorefrontError):
    pass


class CheckoutError(StorefrontError):
    pass


class EmptyCartError(CheckoutError):
    pass
