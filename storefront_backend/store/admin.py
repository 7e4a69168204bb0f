# store/admin.py

from django.contrib import admin

from store.models import Store, VisitorEvent


@admin.register(Store)
class StoreAdmin(admin.ModelAdmin):
    list_display = ("store_name", "slug", "seller", "contact_phone", "is_active", "created_at")
    list_filter = ("is_active",)
    search_fields = ("store_name", "slug", "seller__phone", "contact_phone")
    readonly_fields = ("slug", "created_at", "updated_at")


@admin.register(VisitorEvent)
class VisitorEventAdmin(admin.ModelAdmin):
    list_display = ("store", "created_at")
    list_filter = ("store",)
    date_hierarchy = "created_at"
