from django.contrib import admin

from .models import Chef


@admin.register(Chef)
class ChefAdmin(admin.ModelAdmin):
    list_display = ('user', 'rating', 'ratings_count', 'is_verified', 'is_active', 'created_at')
    list_filter = ('is_verified', 'is_active', 'offers_delivery', 'offers_pickup')
    search_fields = ('user__email', 'user__name', 'bio')
    readonly_fields = ('rating', 'ratings_count', 'created_at', 'updated_at')
