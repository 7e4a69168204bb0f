# store/views/admin_console.py

"""
PLATFORM ADMIN CONSOLE VIEWS (role: admin)

- GET  /api/store/admin/stores/?q=<text>
- POST /api/store/admin/stores/<store_id>/toggle/   {"current_active": true}
"""

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework.response import Response
from rest_framework.views import APIView

from permissions.guards import IsPlatformAdmin
from store.serializers import AdminConsoleSerializer, ToggleStoreSerializer
from store.services.admin_console import load_admin_console, toggle_store_activation
from store.services.exceptions import StoreServiceError
from store.views.errors import service_error_response


class AdminStoreListView(APIView):
    permission_classes = [IsPlatformAdmin]
    serializer_class = AdminConsoleSerializer

    @extend_schema(
        parameters=[
            OpenApiParameter(
                name="q",
                type=str,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Case-insensitive filter on store name or phone",
            ),
        ],
        responses={200: AdminConsoleSerializer},
        description="Every store with metrics (metrics ignore the filter)",
    )
    def get(self, request):
        try:
            console = load_admin_console(user=request.user, query=request.query_params.get("q"))
        except StoreServiceError as exc:
            return service_error_response(exc)

        return Response(AdminConsoleSerializer(console).data)


class AdminStoreToggleView(APIView):
    permission_classes = [IsPlatformAdmin]
    serializer_class = ToggleStoreSerializer

    @extend_schema(
        request=ToggleStoreSerializer,
        responses={
            200: AdminConsoleSerializer,
            404: OpenApiResponse(description="Store not found"),
            503: OpenApiResponse(description="Write failed, nothing changed"),
        },
        description="Flip a store's active flag and return the reloaded console",
    )
    def post(self, request, store_id):
        serializer = ToggleStoreSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            console = toggle_store_activation(
                user=request.user,
                store_id=store_id,
                current_active=serializer.validated_data["current_active"],
                query=serializer.validated_data.get("q"),
            )
        except StoreServiceError as exc:
            return service_error_response(exc)

        return Response(AdminConsoleSerializer(console).data)
