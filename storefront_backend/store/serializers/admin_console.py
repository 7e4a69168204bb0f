# store/serializers/admin_console.py

from rest_framework import serializers


class StoreRowSerializer(serializers.Serializer):
    store_id = serializers.UUIDField()
    store_name = serializers.CharField()
    slug = serializers.CharField()
    seller_phone = serializers.CharField()
    contact_phone = serializers.CharField()
    is_active = serializers.BooleanField()
    product_count = serializers.IntegerField()
    visits_last_7_days = serializers.IntegerField()
    visits_last_30_days = serializers.IntegerField()
    joined_at = serializers.DateTimeField()


class AdminMetricsSerializer(serializers.Serializer):
    total_sellers = serializers.IntegerField()
    active_sellers = serializers.IntegerField()
    total_products = serializers.IntegerField()
    average_products_per_store = serializers.DecimalField(max_digits=8, decimal_places=1)
    total_monthly_visits = serializers.IntegerField()
    average_monthly_visits = serializers.DecimalField(max_digits=12, decimal_places=1)


class AdminConsoleSerializer(serializers.Serializer):
    metrics = AdminMetricsSerializer()
    stores = StoreRowSerializer(many=True)
    query = serializers.CharField(allow_blank=True)


class ToggleStoreSerializer(serializers.Serializer):
    """current_active is the flag as the admin last saw it; the new value is its negation."""

    current_active = serializers.BooleanField()
    q = serializers.CharField(required=False, allow_blank=True)
