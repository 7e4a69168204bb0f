# products/serializers/product.py

"""
PRODUCT SERIALIZERS

- ProductSerializer: read model for the seller console and the storefront
- ProductWriteSerializer: multipart / JSON input for add + edit
  (business rules live in products.services.catalog)
"""

from rest_framework import serializers

from products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "price",
            "images",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ProductWriteSerializer(serializers.Serializer):
    """
    Input shape only.

    - retained_images omitted: keep every current image (edit)
    - retained_images=[""]: drop every current image
    - images: new files (multipart, repeat the key per file)
    """

    name = serializers.CharField(required=False, allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True)
    price = serializers.CharField(required=False, allow_blank=True)

    retained_images = serializers.ListField(
        child=serializers.CharField(allow_blank=True),
        required=False,
    )
    images = serializers.ListField(
        child=serializers.FileField(),
        required=False,
    )

    def validate_retained_images(self, value):
        return [url for url in value if url]
