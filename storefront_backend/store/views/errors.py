# store/views/errors.py

"""
SERVICE ERROR -> HTTP

One mapping for every storefront view (seller, catalog, public, admin).
"""

from rest_framework import status
from rest_framework.response import Response

from permissions.guards import ROUTE_DASHBOARD
from store.services.exceptions import (
    AuthorizationError,
    BackendWriteError,
    InputValidationError,
    ProductNotFoundError,
    StoreAlreadyExistsError,
    StoreNotFoundError,
    StoreServiceError,
)


def service_error_response(exc: StoreServiceError) -> Response:
    if isinstance(exc, InputValidationError):
        return Response(exc.errors, status=status.HTTP_400_BAD_REQUEST)

    if isinstance(exc, StoreAlreadyExistsError):
        return Response(
            {"detail": str(exc), "redirect": ROUTE_DASHBOARD},
            status=status.HTTP_409_CONFLICT,
        )

    if isinstance(exc, (StoreNotFoundError, ProductNotFoundError)):
        return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)

    if isinstance(exc, AuthorizationError):
        return Response(
            {"detail": str(exc), "redirect": ROUTE_DASHBOARD},
            status=status.HTTP_403_FORBIDDEN,
        )

    if isinstance(exc, BackendWriteError):
        return Response({"detail": str(exc)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)

    return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
