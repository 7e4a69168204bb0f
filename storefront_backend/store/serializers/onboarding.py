# store/serializers/onboarding.py

from rest_framework import serializers


class OnboardingSerializer(serializers.Serializer):
    """
    Input shape only.
    Store name length, phone digits and terms are enforced by
    store.services.onboarding so every caller gets the same rules.
    """

    store_name = serializers.CharField(allow_blank=True)
    contact_phone = serializers.CharField(allow_blank=True)
    terms_accepted = serializers.BooleanField(default=False)


class OnboardingStatusSerializer(serializers.Serializer):
    has_store = serializers.BooleanField()
    redirect = serializers.CharField(allow_null=True)
