import logging

from django.contrib.auth import authenticate
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle
from rest_framework.views import APIView
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken

from permissions.guards import ROUTE_DASHBOARD, ROUTE_ONBOARDING, IsSignedIn
from users.serializers import (
    LoginSerializer,
    LogoutSerializer,
    RegisterSerializer,
    SessionResponseSerializer,
    VerifyRegistrationSerializer,
)
from users.services.verification import (
    AccountExistsError,
    VerificationError,
    request_registration,
    verify_registration,
)
from users.views.me import principal_payload

logger = logging.getLogger(__name__)


class AuthThrottle(AnonRateThrottle):
    scope = "auth"


def _session_payload(user, next_route: str) -> dict:
    refresh = RefreshToken.for_user(user)
    return {
        "access": str(refresh.access_token),
        "refresh": str(refresh),
        "user": principal_payload(user),
        "next": next_route,
    }


# ---------------------------
# VIEWS
# ---------------------------


class RegisterView(APIView):
    permission_classes = [AllowAny]
    throttle_classes = [AuthThrottle]
    serializer_class = RegisterSerializer

    @extend_schema(
        request=RegisterSerializer,
        responses={
            202: OpenApiResponse(description="Verification code sent"),
            400: OpenApiResponse(description="Invalid phone / PIN"),
            409: OpenApiResponse(description="Phone already registered"),
        },
        description="Step 1 of seller sign-up: phone + PIN, sends an SMS code",
    )
    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data

        try:
            request_registration(phone=data["phone"], pin=data["pin"])
        except AccountExistsError as exc:
            return Response(
                {"detail": str(exc), "redirect": "/auth/login"},
                status=status.HTTP_409_CONFLICT,
            )
        except VerificationError as exc:
            return Response({"phone": [str(exc)]}, status=status.HTTP_400_BAD_REQUEST)

        return Response(
            {
                "detail": "Verification code sent",
                "step": "verify",
                "phone": data["phone"],
            },
            status=status.HTTP_202_ACCEPTED,
        )


class VerifyRegistrationView(APIView):
    permission_classes = [AllowAny]
    throttle_classes = [AuthThrottle]
    serializer_class = VerifyRegistrationSerializer

    @extend_schema(
        request=VerifyRegistrationSerializer,
        responses={201: SessionResponseSerializer},
        description="Step 2 of seller sign-up: confirm the SMS code and open a session",
    )
    def post(self, request):
        serializer = VerifyRegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data

        try:
            user = verify_registration(phone=data["phone"], code=data["code"])
        except AccountExistsError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)
        except VerificationError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(
            _session_payload(user, ROUTE_ONBOARDING),
            status=status.HTTP_201_CREATED,
        )


class LoginView(APIView):
    permission_classes = [AllowAny]
    throttle_classes = [AuthThrottle]
    serializer_class = LoginSerializer

    @extend_schema(
        request=LoginSerializer,
        responses={200: SessionResponseSerializer},
        description="Authenticate a seller with phone number and PIN",
    )
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = authenticate(
            request=request,
            phone=serializer.validated_data["phone"],
            password=serializer.validated_data["pin"],
        )

        if not user:
            logger.warning("Failed login", extra={"phone": serializer.validated_data["phone"]})
            return Response(
                {"detail": "Invalid credentials"},
                status=status.HTTP_401_UNAUTHORIZED,
            )

        return Response(_session_payload(user, ROUTE_DASHBOARD))


class LogoutView(APIView):
    permission_classes = [IsSignedIn]
    serializer_class = LogoutSerializer

    @extend_schema(
        request=LogoutSerializer,
        responses={205: OpenApiResponse(description="Signed out")},
        description="Sign out: blacklist the refresh token",
    )
    def post(self, request):
        serializer = LogoutSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            RefreshToken(serializer.validated_data["refresh"]).blacklist()
        except TokenError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(
            {"detail": "Signed out", "redirect": "/"},
            status=status.HTTP_205_RESET_CONTENT,
        )
