# custom_auth/serializers.py
from rest_framework import serializers

from .models import CustomUser


class UserSummarySerializer(serializers.ModelSerializer):
    """Compact form embedded in chef profiles and orders."""

    class Meta:
        model = CustomUser
        fields = ['id', 'name', 'email']


class UserSerializer(serializers.ModelSerializer):
    phone = serializers.CharField(source='phone_number', read_only=True)
    location = serializers.JSONField(read_only=True)
    createdAt = serializers.DateTimeField(source='date_joined', read_only=True)

    class Meta:
        model = CustomUser
        fields = ['id', 'name', 'email', 'role', 'phone', 'location', 'createdAt']
        read_only_fields = fields
