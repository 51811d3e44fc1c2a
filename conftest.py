import os
from decimal import Decimal

import django
import pytest

# Configure Django settings before importing Django models
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'homecook.test_settings')
django.setup()

from django.core.cache import cache  # noqa: E402
from django.utils import timezone  # noqa: E402
from django.contrib.auth import get_user_model  # noqa: E402
from rest_framework.test import APIClient  # noqa: E402


@pytest.fixture(autouse=True)
def clear_throttle_cache():
    """Throttle buckets live in the cache; start every test empty."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_user(db):
    User = get_user_model()

    def _make(email, role='user', **extra):
        return User.objects.create_user(
            username=email,
            email=email,
            password='testpass123',
            role=role,
            name=extra.pop('name', email.split('@')[0].title()),
            **extra,
        )

    return _make


@pytest.fixture
def customer(make_user):
    return make_user('customer@test.com')


@pytest.fixture
def chef_user(make_user):
    return make_user('chef@test.com', role='chef', latitude=Decimal('40.712800'), longitude=Decimal('-74.006000'))


@pytest.fixture
def chef(chef_user):
    from chefs.models import Chef

    return Chef.objects.create(user=chef_user, bio='Home-style pasta', specialties=['Italian'])


@pytest.fixture
def admin_account(make_user):
    return make_user('admin@test.com', role='admin')


@pytest.fixture
def make_menu_item(db):
    from menus.models import MenuItem

    def _make(chef, **overrides):
        fields = {
            'title': 'Lasagna',
            'description': 'Layered pasta bake',
            'price': Decimal('10.00'),
            'category': 'dinner',
            'cuisine': 'Italian',
            'preparation_time': 45,
            'available_date': timezone.localdate(),
            'available_quantity': 10,
        }
        fields.update(overrides)
        return MenuItem.objects.create(chef=chef, **fields)

    return _make
