from rest_framework import serializers

from users.services.phone import (
    digits_only,
    is_valid_phone,
    is_valid_pin,
    is_valid_verification_code,
)


def _validate_phone(value):
    if not is_valid_phone(value):
        raise serializers.ValidationError("Please enter a valid phone number")
    return digits_only(value)


def _validate_pin(value):
    if not is_valid_pin(value):
        raise serializers.ValidationError("PIN must be exactly 4 digits")
    return value


# ---------------- REGISTER (STEP 1) ----------------
class RegisterSerializer(serializers.Serializer):
    phone = serializers.CharField()
    pin = serializers.CharField(write_only=True, style={"input_type": "password"})
    confirm_pin = serializers.CharField(write_only=True, style={"input_type": "password"})

    def validate_phone(self, value):
        return _validate_phone(value)

    def validate_pin(self, value):
        return _validate_pin(value)

    def validate_confirm_pin(self, value):
        return _validate_pin(value)

    def validate(self, attrs):
        if attrs["pin"] != attrs["confirm_pin"]:
            raise serializers.ValidationError(
                {"confirm_pin": "Please make sure both PINs are the same"}
            )
        return attrs


# ---------------- REGISTER (STEP 2) ----------------
class VerifyRegistrationSerializer(serializers.Serializer):
    phone = serializers.CharField()
    code = serializers.CharField()

    def validate_phone(self, value):
        return _validate_phone(value)

    def validate_code(self, value):
        if not is_valid_verification_code(value):
            raise serializers.ValidationError("Please enter the 6-digit verification code")
        return value


# ---------------- LOGIN / LOGOUT (INPUT ONLY) ----------------
class LoginSerializer(serializers.Serializer):
    """
    Input validation only.
    Authentication is handled in the view.
    """

    phone = serializers.CharField()
    pin = serializers.CharField(write_only=True, style={"input_type": "password"})

    def validate_phone(self, value):
        return _validate_phone(value)

    def validate_pin(self, value):
        return _validate_pin(value)


class LogoutSerializer(serializers.Serializer):
    refresh = serializers.CharField()


# ---------------- OUTPUT ----------------
class PrincipalSerializer(serializers.Serializer):
    """
    Safe principal representation for frontend consumption.
    """

    id = serializers.UUIDField()
    phone = serializers.CharField()
    role = serializers.CharField()
    has_store = serializers.BooleanField()


class SessionResponseSerializer(serializers.Serializer):
    access = serializers.CharField()
    refresh = serializers.CharField()
    user = PrincipalSerializer()
    next = serializers.CharField()


class GateResponseSerializer(serializers.Serializer):
    route = serializers.CharField()
    gated = serializers.BooleanField()
    state = serializers.CharField()
    redirect = serializers.CharField(allow_null=True)
