"""Allowed order status moves."""
from .models import Order

ALLOWED_TRANSITIONS = {
    Order.STATUS_PENDING: {Order.STATUS_CONFIRMED, Order.STATUS_CANCELLED},
    Order.STATUS_CONFIRMED: {Order.STATUS_PREPARING, Order.STATUS_CANCELLED},
    Order.STATUS_PREPARING: {Order.STATUS_READY, Order.STATUS_CANCELLED},
    # pickup orders go straight from ready to delivered
    Order.STATUS_READY: {Order.STATUS_OUT_FOR_DELIVERY, Order.STATUS_DELIVERED, Order.STATUS_CANCELLED},
    Order.STATUS_OUT_FOR_DELIVERY: {Order.STATUS_DELIVERED, Order.STATUS_CANCELLED},
    Order.STATUS_DELIVERED: set(),
    Order.STATUS_CANCELLED: set(),
}

VALID_STATUSES = frozenset(ALLOWED_TRANSITIONS)


def can_transition(current: str, new: str) -> bool:
    return new in ALLOWED_TRANSITIONS.get(current, set())


def is_terminal(status: str) -> bool:
    return not ALLOWED_TRANSITIONS.get(status)
