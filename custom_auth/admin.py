from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from .models import CustomUser


@admin.register(CustomUser)
class CustomUserAdmin(UserAdmin):
    list_display = ('email', 'name', 'role', 'is_active', 'date_joined')
    list_filter = ('role', 'is_active', 'is_staff')
    search_fields = ('email', 'name', 'phone_number')
    ordering = ('-date_joined',)
    fieldsets = UserAdmin.fieldsets + (
        ('Marketplace', {'fields': ('name', 'role', 'phone_number', 'street_address', 'latitude', 'longitude')}),
    )
