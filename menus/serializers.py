# menus/serializers.py
from rest_framework import serializers

from chefs.serializers import ChefSummarySerializer

from .models import MenuItem


class MenuItemSerializer(serializers.ModelSerializer):
    chef = ChefSummarySerializer(read_only=True)
    dietaryInfo = serializers.JSONField(source='dietary_info', read_only=True)
    preparationTime = serializers.IntegerField(source='preparation_time', read_only=True)
    availableDate = serializers.DateField(source='available_date', read_only=True)
    availableQuantity = serializers.IntegerField(source='available_quantity', read_only=True)
    isAvailable = serializers.BooleanField(source='is_available', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = MenuItem
        fields = [
            'id', 'chef', 'title', 'description', 'image', 'price', 'category', 'cuisine',
            'dietaryInfo', 'ingredients', 'preparationTime', 'availableDate',
            'availableQuantity', 'isAvailable', 'createdAt',
        ]
        read_only_fields = fields
