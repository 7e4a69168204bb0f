# public/views/storefront.py

"""
PUBLIC STOREFRONT

GET /api/public/stores/<slug>/
GET /api/public/stores/<slug>/products/<product_id>/

Rules:
- AllowAny (public)
- Unknown and deactivated stores answer the same 404 {"detail": "Store not found"}
- Only the storefront page records a visit

Security hardening:
- Throttle to reduce scraping/abuse
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle
from rest_framework.views import APIView

from public.serializers import StorefrontProductSerializer, StorefrontSerializer
from public.services.storefront import resolve_storefront, resolve_storefront_product
from store.services.exceptions import StoreServiceError
from store.views.errors import service_error_response


class PublicStorefrontThrottle(AnonRateThrottle):
    scope = "public_storefront"


class StorefrontView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [PublicStorefrontThrottle]
    serializer_class = StorefrontSerializer

    @extend_schema(
        tags=["Public"],
        responses={
            200: StorefrontSerializer,
            404: OpenApiResponse(description="Store not found"),
        },
        description="Public storefront for /store/<slug>",
    )
    def get(self, request, slug):
        try:
            payload = resolve_storefront(slug)
        except StoreServiceError as exc:
            return service_error_response(exc)

        return Response(StorefrontSerializer(payload).data)


class StorefrontProductView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [PublicStorefrontThrottle]
    serializer_class = StorefrontProductSerializer

    @extend_schema(
        tags=["Public"],
        responses={
            200: StorefrontProductSerializer,
            404: OpenApiResponse(description="Store or product not found"),
        },
        description="One product of a public storefront",
    )
    def get(self, request, slug, product_id):
        try:
            payload = resolve_storefront_product(slug, product_id)
        except StoreServiceError as exc:
            return service_error_response(exc)

        return Response(StorefrontProductSerializer(payload).data)
