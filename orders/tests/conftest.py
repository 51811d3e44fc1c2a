# orders/tests/conftest.py
import pytest

from .factories import order_command


@pytest.fixture
def other_chef(make_user):
    from chefs.models import Chef

    return Chef.objects.create(user=make_user('other.chef@test.com', role='chef'))


@pytest.fixture
def placed_order(customer, chef, make_menu_item):
    from orders.services import create_order

    lasagna = make_menu_item(chef)
    return create_order(customer, order_command([{'menu': lasagna.pk, 'quantity': 1}]))
