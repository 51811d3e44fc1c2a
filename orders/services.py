"""
Order engine: cart validation and pricing on creation, the status lifecycle,
and the single post-delivery review that feeds the chef's rating.

Every write path runs inside ``transaction.atomic`` and locks the rows whose
counters it changes.
"""
import logging
from datetime import timedelta

from django.conf import settings
from django.db import transaction
from django.db.models import F
from django.utils import timezone

from chefs.models import Chef
from custom_auth.permissions import authorize
from menus.models import MenuItem
from shared.exceptions import AuthorizationError, NotFoundError, ValidationError

from .models import Order, OrderItem, OrderStatusUpdate
from .pricing import price_order
from .pydantic_models import CreateOrderCommand
from .transitions import VALID_STATUSES, can_transition, is_terminal

logger = logging.getLogger(__name__)


def delivery_window():
    return timedelta(minutes=getattr(settings, 'ORDER_DELIVERY_WINDOW_MINUTES', 30))


def _order_queryset():
    return (
        Order.objects.select_related('user', 'chef__user')
        .prefetch_related('items', 'status_updates')
    )


def _reload(order_id):
    return _order_queryset().get(pk=order_id)


def create_order(user, command: CreateOrderCommand) -> Order:
    """Validate the cart, price it, persist the order and decrement stock."""
    if not command.items:
        raise ValidationError('Please add items to your order')

    menu_ids = [line.menu for line in command.items]

    with transaction.atomic():
        menus = {
            menu.pk: menu
            for menu in MenuItem.objects.select_for_update().filter(pk__in=menu_ids)
        }
        # a repeated id also lands here: one line per menu item
        if len(menus) != len(menu_ids) or any(not menu.is_available for menu in menus.values()):
            raise ValidationError('Some menu items are not available')

        chef_ids = {menu.chef_id for menu in menus.values()}
        if len(chef_ids) > 1:
            raise ValidationError('All items must be from the same chef')

        chef = Chef.objects.get(pk=chef_ids.pop())
        if not chef.is_active:
            raise ValidationError('Chef is not accepting orders')
        if chef.user_id == user.id:
            raise ValidationError('Chefs cannot order their own menu items')

        for line in command.items:
            menu = menus[line.menu]
            if line.quantity > menu.available_quantity:
                raise ValidationError(f'Only {menu.available_quantity} left of {menu.title}')

        pricing = price_order(
            [(menus[line.menu].price, line.quantity) for line in command.items],
            command.delivery_option,
            chef.offers_delivery,
        )

        address = command.delivery_address.model_dump() if command.delivery_address else {}
        order = Order.objects.create(
            user=user,
            chef=chef,
            delivery_address=address,
            delivery_option=command.delivery_option,
            delivery_instructions=command.delivery_instructions,
            status=Order.STATUS_PENDING,
            subtotal=pricing.subtotal,
            tax=pricing.tax,
            delivery_fee=pricing.delivery_fee,
            total=pricing.total,
            payment_method=command.payment_method,
            payment_status=Order.PAYMENT_PENDING,
        )
        OrderItem.objects.bulk_create([
            OrderItem(
                order=order,
                menu=menus[line.menu],
                title=menus[line.menu].title,
                quantity=line.quantity,
                price=menus[line.menu].price,
            )
            for line in command.items
        ])
        OrderStatusUpdate.objects.create(order=order, status=Order.STATUS_PENDING, timestamp=timezone.now())

        for line in command.items:
            MenuItem.objects.filter(pk=line.menu).update(
                available_quantity=F('available_quantity') - line.quantity
            )
        MenuItem.objects.filter(pk__in=menu_ids, available_quantity__lte=0).update(is_available=False)

    logger.info(
        "Order %s placed by user %s with chef %s: total %s",
        order.pk, user.pk, chef.pk, pricing.total,
    )
    return _reload(order.pk)


def orders_visible_to(user):
    """Orders the user may list: all for admins, fulfilled ones for chefs, own ones otherwise."""
    orders = _order_queryset()
    if user.is_admin:
        return orders
    if user.role == 'chef':
        chef = Chef.objects.filter(user=user).first()
        if chef is None:
            raise NotFoundError('Chef profile not found')
        return orders.filter(chef=chef)
    return orders.filter(user=user)


def _is_fulfilling_chef(user, order):
    return user.role == 'chef' and order.chef.user_id == user.id


def get_order_for(user, order_id) -> Order:
    order = _order_queryset().filter(pk=order_id).first()
    if order is None:
        raise NotFoundError(f'Order not found with id of {order_id}')
    if not (user.is_admin or order.user_id == user.id or _is_fulfilling_chef(user, order)):
        raise AuthorizationError('Not authorized to access this order')
    return order


def update_order_status(user, order_id, status) -> Order:
    """Move an order along the lifecycle and record the change in its history."""
    if not status:
        raise ValidationError('Please provide a status')
    if status not in VALID_STATUSES:
        raise ValidationError(f"'{status}' is not a valid order status")

    with transaction.atomic():
        order = Order.objects.select_for_update().select_related('chef').filter(pk=order_id).first()
        if order is None:
            raise NotFoundError(f'Order not found with id of {order_id}')
        if not (user.is_admin or _is_fulfilling_chef(user, order)):
            raise AuthorizationError('Not authorized to update this order')
        if is_terminal(order.status):
            raise ValidationError(f'Order is already {order.status}')
        if not can_transition(order.status, status):
            raise ValidationError(f'Cannot change order status from {order.status} to {status}')

        now = timezone.now()
        previous = order.status
        order.status = status
        fields = ['status', 'updated_at']
        if status == Order.STATUS_OUT_FOR_DELIVERY:
            order.estimated_delivery_time = now + delivery_window()
            fields.append('estimated_delivery_time')
        order.save(update_fields=fields)
        OrderStatusUpdate.objects.create(order=order, status=status, timestamp=now)

    logger.info("Order %s moved %s -> %s by user %s", order.pk, previous, status, user.pk)
    return _reload(order.pk)


def add_order_review(user, order_id, rating, review='') -> Order:
    """Record the purchaser's review of a delivered order and fold it into the chef rating."""
    if rating is None:
        raise ValidationError('Please provide a rating')
    if not 1 <= rating <= 5:
        raise ValidationError('Rating must be between 1 and 5')

    with transaction.atomic():
        order = Order.objects.select_for_update().filter(pk=order_id).first()
        if order is None:
            raise NotFoundError(f'Order not found with id of {order_id}')
        authorize(user, owner_id=order.user_id, message='Not authorized to review this order')
        if order.status != Order.STATUS_DELIVERED:
            raise ValidationError('Can only review delivered orders')
        if order.is_reviewed:
            raise ValidationError('Order has already been reviewed')

        order.rating = rating
        order.review = review or ''
        order.reviewed_at = timezone.now()
        order.save(update_fields=['rating', 'review', 'reviewed_at', 'updated_at'])

        chef = Chef.objects.select_for_update().get(pk=order.chef_id)
        chef.apply_rating(rating)
        chef.save(update_fields=['rating', 'ratings_count', 'updated_at'])

    logger.info("Order %s reviewed %s/5; chef %s now %.2f", order.pk, rating, chef.pk, chef.rating)
    return _reload(order.pk)
