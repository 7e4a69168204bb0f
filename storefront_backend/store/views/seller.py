# store/views/seller.py

"""
SELLER CONSOLE VIEWS

- GET  /api/store/onboarding/   -> has_store + where to go
- POST /api/store/onboarding/   -> create the seller's store (once)
- GET  /api/store/dashboard/    -> store, products, counts, visits
- GET  /api/store/share-url/    -> public store link
"""

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from permissions.guards import ROUTE_DASHBOARD, ROUTE_ONBOARDING, IsSignedIn
from store.serializers import (
    DashboardSerializer,
    OnboardingSerializer,
    OnboardingStatusSerializer,
    ShareUrlSerializer,
    StoreSerializer,
)
from store.services.dashboard import load_dashboard, store_url
from store.services.exceptions import StoreAlreadyExistsError, StoreServiceError
from store.services.onboarding import create_store, seller_store
from store.views.errors import service_error_response


class OnboardingView(APIView):
    permission_classes = [IsSignedIn]
    serializer_class = OnboardingSerializer

    @extend_schema(
        responses={200: OnboardingStatusSerializer},
        description="Whether the seller still needs to onboard",
    )
    def get(self, request):
        has_store = seller_store(request.user) is not None
        payload = {
            "has_store": has_store,
            "redirect": ROUTE_DASHBOARD if has_store else None,
        }
        return Response(OnboardingStatusSerializer(payload).data)

    @extend_schema(
        request=OnboardingSerializer,
        responses={
            201: StoreSerializer,
            400: OpenApiResponse(description="Invalid store details / name taken"),
            409: OpenApiResponse(description="Seller already has a store"),
        },
        description="Create the seller's store",
    )
    def post(self, request):
        # An existing store wins over any input problem.
        if seller_store(request.user) is not None:
            return service_error_response(StoreAlreadyExistsError("You already have a store"))

        serializer = OnboardingSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            store = create_store(
                user=request.user,
                store_name=data["store_name"],
                contact_phone=data["contact_phone"],
                terms_accepted=data["terms_accepted"],
            )
        except StoreServiceError as exc:
            return service_error_response(exc)

        payload = dict(StoreSerializer(store).data)
        payload["store_url"] = store_url(store)
        payload["redirect"] = ROUTE_DASHBOARD
        return Response(payload, status=status.HTTP_201_CREATED)


class DashboardView(APIView):
    permission_classes = [IsSignedIn]
    serializer_class = DashboardSerializer

    @extend_schema(
        responses={200: DashboardSerializer},
        description="Seller dashboard (store is null until onboarding is done)",
    )
    def get(self, request):
        return Response(DashboardSerializer(load_dashboard(user=request.user)).data)


class ShareUrlView(APIView):
    permission_classes = [IsSignedIn]
    serializer_class = ShareUrlSerializer

    @extend_schema(
        responses={
            200: ShareUrlSerializer,
            404: OpenApiResponse(description="Seller has no store"),
        },
        description="Public link to the seller's storefront",
    )
    def get(self, request):
        store = seller_store(request.user)
        if store is None:
            return Response(
                {"detail": "Store not found", "redirect": ROUTE_ONBOARDING},
                status=status.HTTP_404_NOT_FOUND,
            )

        return Response(ShareUrlSerializer({"slug": store.slug, "store_url": store_url(store)}).data)
