from django.contrib import admin

from .models import Order, OrderItem, OrderStatusUpdate


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    readonly_fields = ('menu', 'title', 'quantity', 'price')


class OrderStatusUpdateInline(admin.TabularInline):
    model = OrderStatusUpdate
    extra = 0
    readonly_fields = ('status', 'timestamp')
    can_delete = False


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ('id', 'user', 'chef', 'status', 'delivery_option', 'total', 'payment_status', 'created_at')
    list_filter = ('status', 'delivery_option', 'payment_method', 'payment_status')
    search_fields = ('user__email', 'chef__user__email')
    readonly_fields = ('subtotal', 'tax', 'delivery_fee', 'total', 'rating', 'review', 'reviewed_at', 'created_at', 'updated_at')
    inlines = [OrderItemInline, OrderStatusUpdateInline]
