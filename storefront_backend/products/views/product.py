# products/views/product.py

"""
PRODUCT VIEWSET (SELLER CATALOG)

Purpose:
- A seller manages the products of THEIR store only
- Add / edit accept multipart uploads (images) or JSON (no new images)

Rules (see products.services.catalog):
- at most 12 products per store, at most 3 images per product
- everything is validated before any upload

List filters (products.filters.ProductFilter): name, min_price, max_price
"""

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response

from permissions.guards import IsSignedIn
from products.filters import ProductFilter
from products.models import MAX_PRODUCTS_PER_STORE, Product
from products.serializers import ProductSerializer, ProductWriteSerializer
from products.services.catalog import delete_product, save_product
from store.services.dashboard import product_summary
from store.services.exceptions import StoreServiceError
from store.views.errors import service_error_response


class ProductViewSet(viewsets.ModelViewSet):
    serializer_class = ProductSerializer
    permission_classes = [IsSignedIn]
    parser_classes = [MultiPartParser, FormParser, JSONParser]
    filterset_class = ProductFilter
    http_method_names = ["get", "post", "put", "patch", "delete", "head", "options"]

    def get_queryset(self):
        if getattr(self, "swagger_fake_view", False):
            return Product.objects.none()
        return Product.objects.filter(store__seller=self.request.user).order_by("-created_at")

    # -----------------------------
    # LIST
    # -----------------------------
    @extend_schema(description="List the seller's products; summary always counts the whole store")
    def list(self, request, *args, **kwargs):
        qs = self.get_queryset()
        data = self.get_serializer(self.filter_queryset(qs), many=True).data
        return Response(
            {
                "count": len(data),
                "max_products": MAX_PRODUCTS_PER_STORE,
                "summary": product_summary(qs.count()),
                "results": data,
            }
        )

    # -----------------------------
    # ADD
    # -----------------------------
    @extend_schema(
        request=ProductWriteSerializer,
        responses={
            201: ProductSerializer,
            400: OpenApiResponse(description="Validation / product limit / image limit"),
            404: OpenApiResponse(description="Seller has no store"),
            503: OpenApiResponse(description="Storage or database write failed"),
        },
        description="Add a product (multipart: name, description, price, images[])",
    )
    def create(self, request, *args, **kwargs):
        serializer = ProductWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            product = save_product(
                user=request.user,
                name=data.get("name", ""),
                description=data.get("description", ""),
                price=data.get("price"),
                new_images=data.get("images", []),
            )
        except StoreServiceError as exc:
            return service_error_response(exc)

        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    # -----------------------------
    # EDIT
    # -----------------------------
    @extend_schema(
        request=ProductWriteSerializer,
        responses={200: ProductSerializer},
        description="Edit a product; omitted fields keep their current value",
    )
    def update(self, request, *args, **kwargs):
        product = self.get_object()

        serializer = ProductWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            product = save_product(
                user=request.user,
                product_id=product.id,
                name=data.get("name", product.name),
                description=data.get("description", product.description),
                price=data.get("price", product.price),
                retained_images=data.get("retained_images"),
                new_images=data.get("images", []),
            )
        except StoreServiceError as exc:
            return service_error_response(exc)

        return Response(ProductSerializer(product).data)

    def partial_update(self, request, *args, **kwargs):
        return self.update(request, *args, **kwargs)

    # -----------------------------
    # DELETE
    # -----------------------------
    def destroy(self, request, *args, **kwargs):
        product = self.get_object()

        try:
            delete_product(user=request.user, product_id=product.id)
        except StoreServiceError as exc:
            return service_error_response(exc)

        return Response(status=status.HTTP_204_NO_CONTENT)
