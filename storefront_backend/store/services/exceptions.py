# store/services/exceptions.py

"""
STOREFRONT SERVICE ERRORS

Centralized domain errors for seller / storefront / admin services.
Views map them to HTTP:

- InputValidationError    -> 400 (field errors)
- StoreAlreadyExistsError -> 409 (+ redirect to the dashboard)
- StoreNotFoundError      -> 404
- AuthorizationError      -> 403
- BackendWriteError       -> 503 (raw backend message)
"""


class StoreServiceError(Exception):
    """Base exception for all storefront service failures."""


class InputValidationError(StoreServiceError):
    """
    Raised when caller input is rejected before anything is written.

    errors: {field: [message, ...]}
    """

    def __init__(self, errors):
        self.errors = {
            field: [messages] if isinstance(messages, str) else list(messages)
            for field, messages in errors.items()
        }
        first = next(iter(self.errors.values()), ["Invalid input"])
        super().__init__(first[0] if first else "Invalid input")


class ProductLimitError(InputValidationError):
    """Raised when a store already holds the maximum number of products."""


class ImageLimitError(InputValidationError):
    """Raised when a product would carry more images than allowed."""


class StoreAlreadyExistsError(StoreServiceError):
    """Raised when a seller who already owns a store tries to onboard again."""


class StoreNotFoundError(StoreServiceError):
    """Raised for unknown and deactivated stores alike."""


class AuthorizationError(StoreServiceError):
    """Raised when the caller lacks the role an operation needs."""


class BackendWriteError(StoreServiceError):
    """Raised when the database or object storage refuses a write."""


class ProductNotFoundError(StoreServiceError):
    """Raised when a product does not exist in the caller's store."""
