# orders/tests/test_transitions.py
import pytest

from orders.models import Order
from orders.transitions import ALLOWED_TRANSITIONS, can_transition, is_terminal


@pytest.mark.parametrize('current,new', [
    (Order.STATUS_PENDING, Order.STATUS_CONFIRMED),
    (Order.STATUS_CONFIRMED, Order.STATUS_PREPARING),
    (Order.STATUS_PREPARING, Order.STATUS_READY),
    (Order.STATUS_READY, Order.STATUS_OUT_FOR_DELIVERY),
    (Order.STATUS_READY, Order.STATUS_DELIVERED),
    (Order.STATUS_OUT_FOR_DELIVERY, Order.STATUS_DELIVERED),
    (Order.STATUS_PENDING, Order.STATUS_CANCELLED),
    (Order.STATUS_OUT_FOR_DELIVERY, Order.STATUS_CANCELLED),
])
def test_forward_moves_allowed(current, new):
    assert can_transition(current, new)


@pytest.mark.parametrize('current,new', [
    (Order.STATUS_PENDING, Order.STATUS_DELIVERED),
    (Order.STATUS_DELIVERED, Order.STATUS_PENDING),
    (Order.STATUS_CANCELLED, Order.STATUS_CONFIRMED),
    (Order.STATUS_PREPARING, Order.STATUS_CONFIRMED),
    (Order.STATUS_READY, Order.STATUS_READY),
])
def test_backward_and_skipping_moves_rejected(current, new):
    assert not can_transition(current, new)


def test_every_status_has_an_entry():
    assert set(ALLOWED_TRANSITIONS) == {value for value, _ in Order.STATUS_CHOICES}


def test_terminal_states():
    assert is_terminal(Order.STATUS_DELIVERED)
    assert is_terminal(Order.STATUS_CANCELLED)
    assert not is_terminal(Order.STATUS_READY)
