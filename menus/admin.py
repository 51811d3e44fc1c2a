from django.contrib import admin

from .models import MenuItem


@admin.register(MenuItem)
class MenuItemAdmin(admin.ModelAdmin):
    list_display = ('title', 'chef', 'price', 'category', 'available_date', 'available_quantity', 'is_available')
    list_filter = ('category', 'is_available', 'available_date', 'vegetarian', 'vegan', 'gluten_free')
    search_fields = ('title', 'cuisine', 'chef__user__email', 'chef__user__name')
    date_hierarchy = 'available_date'
