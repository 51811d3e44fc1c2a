# orders/serializers.py
from rest_framework import serializers

from chefs.serializers import ChefSummarySerializer
from custom_auth.serializers import UserSummarySerializer

from .models import Order, OrderItem, OrderStatusUpdate


class OrderItemSerializer(serializers.ModelSerializer):
    menu = serializers.PrimaryKeyRelatedField(read_only=True)
    lineTotal = serializers.DecimalField(source='line_total', max_digits=10, decimal_places=2, read_only=True)

    class Meta:
        model = OrderItem
        fields = ['menu', 'title', 'quantity', 'price', 'lineTotal']
        read_only_fields = fields


class OrderStatusUpdateSerializer(serializers.ModelSerializer):
    class Meta:
        model = OrderStatusUpdate
        fields = ['status', 'timestamp']
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    user = UserSummarySerializer(read_only=True)
    chef = ChefSummarySerializer(read_only=True)
    items = OrderItemSerializer(many=True, read_only=True)
    deliveryAddress = serializers.JSONField(source='delivery_address', read_only=True)
    deliveryOption = serializers.CharField(source='delivery_option', read_only=True)
    deliveryInstructions = serializers.CharField(source='delivery_instructions', read_only=True)
    statusUpdates = OrderStatusUpdateSerializer(source='status_updates', many=True, read_only=True)
    estimatedDeliveryTime = serializers.DateTimeField(source='estimated_delivery_time', read_only=True)
    deliveryFee = serializers.DecimalField(source='delivery_fee', max_digits=10, decimal_places=2, read_only=True)
    paymentMethod = serializers.CharField(source='payment_method', read_only=True)
    paymentStatus = serializers.CharField(source='payment_status', read_only=True)
    reviewedAt = serializers.DateTimeField(source='reviewed_at', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Order
        fields = [
            'id', 'user', 'chef', 'items', 'deliveryAddress', 'deliveryOption',
            'deliveryInstructions', 'status', 'statusUpdates', 'estimatedDeliveryTime',
            'subtotal', 'deliveryFee', 'tax', 'total', 'paymentMethod', 'paymentStatus',
            'rating', 'review', 'reviewedAt', 'createdAt', 'updatedAt',
        ]
        read_only_fields = fields
