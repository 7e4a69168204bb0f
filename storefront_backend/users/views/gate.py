from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from permissions.guards import evaluate_gate, normalize_route, route_requirement
from users.serializers import GateResponseSerializer
from users.services.session import SessionContext


class RouteGateView(APIView):
    """
    GET /api/auth/gate/?route=/admin

    Answers a frontend route gate with the same decision every API gate uses:
    - ungated routes are always "authorized"
    - gated routes: authenticated / authorized, or a redirect target
    """

    permission_classes = [AllowAny]
    serializer_class = GateResponseSerializer

    @extend_schema(
        parameters=[
            OpenApiParameter(
                name="route",
                type=str,
                location=OpenApiParameter.QUERY,
                required=True,
                description="Frontend path, e.g. /seller/dashboard or /admin",
            ),
        ],
        responses={200: GateResponseSerializer},
        description="Route gate decision for the current principal",
    )
    def get(self, request):
        route = normalize_route(request.query_params.get("route") or "/")
        gated, required_role = route_requirement(route)

        if not gated:
            payload = {"route": route, "gated": False, "state": "authorized", "redirect": None}
            return Response(GateResponseSerializer(payload).data)

        decision = evaluate_gate(SessionContext.for_request(request), required_role)
        payload = {
            "route": route,
            "gated": True,
            "state": decision.state.value,
            "redirect": decision.redirect,
        }
        return Response(GateResponseSerializer(payload).data)
