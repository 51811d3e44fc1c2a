# chefs/serializers.py
from rest_framework import serializers

from custom_auth.serializers import UserSerializer

from .models import Chef


class ChefSerializer(serializers.ModelSerializer):
    user = UserSerializer(read_only=True)
    profileImage = serializers.CharField(source='profile_image', read_only=True)
    ratingsCount = serializers.IntegerField(source='ratings_count', read_only=True)
    isVerified = serializers.BooleanField(source='is_verified', read_only=True)
    isActive = serializers.BooleanField(source='is_active', read_only=True)
    deliveryOptions = serializers.JSONField(source='delivery_options', read_only=True)
    serviceRadius = serializers.IntegerField(source='service_radius_km', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Chef
        fields = [
            'id', 'user', 'bio', 'specialties', 'profileImage', 'rating', 'ratingsCount',
            'isVerified', 'isActive', 'deliveryOptions', 'serviceRadius', 'createdAt',
        ]
        read_only_fields = fields


class ChefSummarySerializer(serializers.ModelSerializer):
    """Chef reference embedded in menu items and orders."""
    name = serializers.CharField(source='user.name', read_only=True)
    userId = serializers.IntegerField(source='user_id', read_only=True)

    class Meta:
        model = Chef
        fields = ['id', 'userId', 'name', 'rating']
        read_only_fields = fields
