# menus/tests/test_menu_api.py
from datetime import timedelta
from decimal import Decimal

import pytest
from django.urls import reverse
from django.utils import timezone

from menus.models import MenuItem


def _menu_body(**overrides):
    body = {
        'title': 'Pad Thai',
        'description': 'Rice noodles, tamarind, peanuts',
        'price': 13.5,
        'category': 'dinner',
        'cuisine': 'Thai',
        'dietaryInfo': {'vegetarian': True, 'nutFree': False},
        'ingredients': ['rice noodles', 'tamarind', 'peanuts'],
        'preparationTime': 25,
        'availableDate': timezone.localdate().isoformat(),
        'availableQuantity': 12,
    }
    body.update(overrides)
    return body


@pytest.mark.django_db
class TestMenuCreate:

    def test_chef_creates_item(self, api_client, chef):
        api_client.force_authenticate(user=chef.user)
        resp = api_client.post(reverse('menus:menu_list'), _menu_body(), format='json')

        assert resp.status_code == 201, resp.content
        data = resp.json()['data']
        assert data['price'] == 13.5
        assert data['chef']['id'] == chef.pk
        assert data['dietaryInfo']['vegetarian'] is True
        assert data['isAvailable'] is True
        item = MenuItem.objects.get(pk=data['id'])
        assert item.price == Decimal('13.50')
        assert item.ingredients == ['rice noodles', 'tamarind', 'peanuts']

    def test_customer_is_forbidden(self, api_client, customer):
        api_client.force_authenticate(user=customer)
        resp = api_client.post(reverse('menus:menu_list'), _menu_body(), format='json')
        assert resp.status_code == 403

    def test_chef_role_without_profile(self, api_client, make_user):
        api_client.force_authenticate(user=make_user('new.chef@test.com', role='chef'))
        resp = api_client.post(reverse('menus:menu_list'), _menu_body(), format='json')
        assert resp.status_code == 403
        assert resp.json()['message'] == 'Only chefs can create menu items'

    @pytest.mark.parametrize('override', [
        {'price': 0},
        {'price': -3},
        {'category': 'brunch'},
        {'title': 'x' * 101},
        {'preparationTime': 0},
        {'availableQuantity': -1},
    ])
    def test_invalid_bodies(self, api_client, chef, override):
        api_client.force_authenticate(user=chef.user)
        resp = api_client.post(reverse('menus:menu_list'), _menu_body(**override), format='json')
        assert resp.status_code == 400
        assert MenuItem.objects.count() == 0


@pytest.mark.django_db
class TestMenuList:

    def test_only_todays_available_items(self, api_client, chef, make_menu_item):
        today = timezone.localdate()
        make_menu_item(chef, title='Today')
        make_menu_item(chef, title='Yesterday', available_date=today - timedelta(days=1))
        make_menu_item(chef, title='Hidden', is_available=False)

        resp = api_client.get(reverse('menus:menu_list'))
        assert resp.status_code == 200
        assert [m['title'] for m in resp.json()['data']] == ['Today']

    def test_filters(self, api_client, chef, make_menu_item):
        make_menu_item(chef, title='Veg Curry', cuisine='Indian', vegetarian=True, vegan=True)
        make_menu_item(chef, title='Butter Chicken', cuisine='Indian')
        make_menu_item(chef, title='Pancakes', cuisine='American', category='breakfast', gluten_free=True)

        url = reverse('menus:menu_list')
        assert api_client.get(url, {'cuisine': 'indian'}).json()['count'] == 2
        assert [m['title'] for m in api_client.get(url, {'vegan': 'true'}).json()['data']] == ['Veg Curry']
        assert [m['title'] for m in api_client.get(url, {'category': 'breakfast'}).json()['data']] == ['Pancakes']
        assert [m['title'] for m in api_client.get(url, {'glutenFree': 'true'}).json()['data']] == ['Pancakes']
        assert api_client.get(url, {'vegetarian': 'false'}).json()['count'] == 3


@pytest.mark.django_db
class TestMenuDetail:

    def test_get(self, api_client, chef, make_menu_item):
        item = make_menu_item(chef)
        resp = api_client.get(reverse('menus:menu_detail', args=[item.pk]))
        assert resp.status_code == 200
        assert resp.json()['data']['title'] == 'Lasagna'

    def test_missing(self, api_client, db):
        resp = api_client.get(reverse('menus:menu_detail', args=[777]))
        assert resp.status_code == 404
        assert resp.json()['message'] == 'Menu item not found with id of 777'

    def test_owner_updates(self, api_client, chef, make_menu_item):
        item = make_menu_item(chef)
        api_client.force_authenticate(user=chef.user)
        resp = api_client.put(reverse('menus:menu_detail', args=[item.pk]), {
            'price': 11.25,
            'availableQuantity': 3,
            'dietaryInfo': {'glutenFree': True},
        }, format='json')

        assert resp.status_code == 200, resp.content
        item.refresh_from_db()
        assert item.price == Decimal('11.25')
        assert item.available_quantity == 3
        assert item.gluten_free is True
        assert item.title == 'Lasagna'

    def test_update_rejects_bad_price(self, api_client, chef, make_menu_item):
        item = make_menu_item(chef)
        api_client.force_authenticate(user=chef.user)
        resp = api_client.put(reverse('menus:menu_detail', args=[item.pk]), {'price': 0}, format='json')
        assert resp.status_code == 400

    @pytest.mark.parametrize('body', [
        {'cuisine': ''},
        {'description': ''},
        {'cuisine': 'x' * 101},
        {'image': 'x' * 501},
    ])
    def test_update_keeps_create_constraints(self, api_client, chef, make_menu_item, body):
        item = make_menu_item(chef)
        api_client.force_authenticate(user=chef.user)
        resp = api_client.put(reverse('menus:menu_detail', args=[item.pk]), body, format='json')
        assert resp.status_code == 400
        assert resp.json()['success'] is False
        item.refresh_from_db()
        assert item.cuisine and item.description

    def test_other_chef_cannot_update_or_delete(self, api_client, chef, make_user, make_menu_item):
        from chefs.models import Chef

        item = make_menu_item(chef)
        intruder = Chef.objects.create(user=make_user('intruder@test.com', role='chef'))
        api_client.force_authenticate(user=intruder.user)

        resp = api_client.put(reverse('menus:menu_detail', args=[item.pk]), {'price': 1}, format='json')
        assert resp.status_code == 401
        resp = api_client.delete(reverse('menus:menu_detail', args=[item.pk]))
        assert resp.status_code == 401
        assert MenuItem.objects.filter(pk=item.pk).exists()

    def test_owner_deletes(self, api_client, chef, make_menu_item):
        item = make_menu_item(chef)
        api_client.force_authenticate(user=chef.user)
        resp = api_client.delete(reverse('menus:menu_detail', args=[item.pk]))
        assert resp.status_code == 200
        assert resp.json() == {'success': True, 'data': {}}
        assert not MenuItem.objects.filter(pk=item.pk).exists()
