# products/admin.py

from django.contrib import admin

from products.models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("name", "store", "price", "image_count", "created_at")
    search_fields = ("name", "store__store_name", "store__slug")
    list_filter = ("store__is_active",)
    readonly_fields = ("created_at", "updated_at")

    @admin.display(description="Images")
    def image_count(self, obj):
        return len(obj.images or [])
