# store/serializers/store.py

from rest_framework import serializers

from products.serializers import ProductSerializer
from store.models import Store


class StoreSerializer(serializers.ModelSerializer):
    class Meta:
        model = Store
        fields = [
            "id",
            "store_name",
            "slug",
            "contact_phone",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class VisitCountsSerializer(serializers.Serializer):
    last_7_days = serializers.IntegerField()
    last_30_days = serializers.IntegerField()


class DashboardSerializer(serializers.Serializer):
    """
    Seller dashboard.

    store is null (and redirect is /seller/onboarding) until the seller onboards.
    """

    store = StoreSerializer(allow_null=True)
    products = ProductSerializer(many=True, required=False)
    product_count = serializers.IntegerField(required=False)
    max_products = serializers.IntegerField(required=False)
    summary = serializers.CharField(required=False)
    store_url = serializers.CharField(required=False)
    visits = VisitCountsSerializer(required=False)
    redirect = serializers.CharField(allow_null=True)


class ShareUrlSerializer(serializers.Serializer):
    slug = serializers.CharField()
    store_url = serializers.CharField()
