# public/serializers.py

"""
PUBLIC STOREFRONT SERIALIZERS

Only what a visitor may see: no seller account data, no activation flags.
"""

from rest_framework import serializers

from products.serializers import ProductSerializer


class PublicStoreSerializer(serializers.Serializer):
    store_name = serializers.CharField()
    slug = serializers.CharField()
    contact_phone = serializers.CharField()


class StorefrontSerializer(serializers.Serializer):
    store = PublicStoreSerializer()
    whatsapp_url = serializers.CharField()
    products = ProductSerializer(many=True)
    product_count = serializers.IntegerField()


class StorefrontProductSerializer(serializers.Serializer):
    store = PublicStoreSerializer()
    whatsapp_url = serializers.CharField()
    product = ProductSerializer()
