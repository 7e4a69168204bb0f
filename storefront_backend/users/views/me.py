from drf_spectacular.utils import extend_schema
from rest_framework.response import Response
from rest_framework.views import APIView

from permissions.guards import IsSignedIn
from store.models import Store
from users.serializers import PrincipalSerializer


def principal_payload(user) -> dict:
    return {
        "id": user.id,
        "phone": user.phone,
        "role": user.role,
        "has_store": Store.objects.filter(seller=user).exists(),
    }


# ---------------------------
# VIEW
# ---------------------------


class MeView(APIView):
    permission_classes = [IsSignedIn]
    serializer_class = PrincipalSerializer

    @extend_schema(
        responses={200: PrincipalSerializer},
        description="Get the current signed-in principal",
    )
    def get(self, request):
        return Response(PrincipalSerializer(principal_payload(request.user)).data)
