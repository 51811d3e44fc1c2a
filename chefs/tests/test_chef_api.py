# chefs/tests/test_chef_api.py
from datetime import timedelta
from decimal import Decimal

import pytest
from django.urls import reverse
from django.utils import timezone

from chefs.models import Chef


@pytest.mark.django_db
class TestChefListAndDetail:

    def test_list_chefs(self, api_client, chef):
        resp = api_client.get(reverse('chefs:chef_list'))
        assert resp.status_code == 200
        body = resp.json()
        assert body['success'] is True
        assert body['count'] == 1
        assert body['data'][0]['user']['name'] == 'Chef'
        assert body['data'][0]['rating'] == 5
        assert body['data'][0]['deliveryOptions'] == {'delivery': True, 'pickup': True}

    def test_detail_includes_menus(self, api_client, chef, make_menu_item):
        make_menu_item(chef)
        resp = api_client.get(reverse('chefs:chef_detail', args=[chef.pk]))
        assert resp.status_code == 200
        data = resp.json()['data']
        assert data['id'] == chef.pk
        assert [m['title'] for m in data['menus']] == ['Lasagna']

    def test_detail_missing(self, api_client, db):
        resp = api_client.get(reverse('chefs:chef_detail', args=[4040]))
        assert resp.status_code == 404
        assert resp.json() == {'success': False, 'message': 'Chef not found with id of 4040'}


@pytest.mark.django_db
class TestChefUpdate:

    def test_owner_updates_whitelisted_fields(self, api_client, chef):
        api_client.force_authenticate(user=chef.user)
        resp = api_client.put(reverse('chefs:chef_detail', args=[chef.pk]), {
            'bio': 'Now with fresh bread',
            'deliveryOptions': {'delivery': False},
            'serviceRadius': 25,
            'rating': 1,
            'ratingsCount': 99,
        }, format='json')

        assert resp.status_code == 200, resp.content
        chef.refresh_from_db()
        assert chef.bio == 'Now with fresh bread'
        assert chef.offers_delivery is False
        assert chef.offers_pickup is True
        assert chef.service_radius_km == 25
        assert chef.rating == 5
        assert chef.ratings_count == 0

    def test_stranger_cannot_update(self, api_client, chef, customer):
        api_client.force_authenticate(user=customer)
        resp = api_client.put(reverse('chefs:chef_detail', args=[chef.pk]), {'bio': 'hijack'}, format='json')
        assert resp.status_code == 401
        chef.refresh_from_db()
        assert chef.bio == 'Home-style pasta'

    def test_admin_can_verify(self, api_client, chef, admin_account):
        api_client.force_authenticate(user=admin_account)
        resp = api_client.put(reverse('chefs:chef_detail', args=[chef.pk]), {'isVerified': True}, format='json')
        assert resp.status_code == 200
        assert resp.json()['data']['isVerified'] is True

    def test_owner_cannot_self_verify(self, api_client, chef):
        api_client.force_authenticate(user=chef.user)
        resp = api_client.put(reverse('chefs:chef_detail', args=[chef.pk]), {'isVerified': True}, format='json')
        assert resp.status_code == 403

    def test_anonymous_update_rejected(self, api_client, chef):
        resp = api_client.put(reverse('chefs:chef_detail', args=[chef.pk]), {'bio': 'x'}, format='json')
        assert resp.status_code == 401


@pytest.mark.django_db
class TestChefMenus:

    def test_filters_by_date_and_availability(self, api_client, chef, make_menu_item):
        today = timezone.localdate()
        make_menu_item(chef, title='Today')
        make_menu_item(chef, title='Tomorrow', available_date=today + timedelta(days=1))
        make_menu_item(chef, title='Sold out', is_available=False)

        resp = api_client.get(reverse('chefs:chef_menus', args=[chef.pk]))
        assert [m['title'] for m in resp.json()['data']] == ['Today', 'Tomorrow']

        resp = api_client.get(reverse('chefs:chef_menus', args=[chef.pk]), {'date': today.isoformat()})
        assert [m['title'] for m in resp.json()['data']] == ['Today']

    def test_bad_date(self, api_client, chef):
        resp = api_client.get(reverse('chefs:chef_menus', args=[chef.pk]), {'date': 'next tuesday'})
        assert resp.status_code == 400


@pytest.mark.django_db
class TestNearbyChefs:

    def _chef_at(self, make_user, email, lat, lng, **chef_fields):
        user = make_user(email, role='chef', latitude=Decimal(str(lat)), longitude=Decimal(str(lng)))
        return Chef.objects.create(user=user, **chef_fields)

    def test_requires_coordinates(self, api_client, db):
        resp = api_client.get(reverse('chefs:nearby_chefs'), {'lat': '40.7'})
        assert resp.status_code == 400
        assert resp.json()['message'] == 'Please provide latitude and longitude'

    def test_rejects_out_of_range(self, api_client, db):
        resp = api_client.get(reverse('chefs:nearby_chefs'), {'lat': '123', 'lng': '0'})
        assert resp.status_code == 400

    def test_radius_and_active_filter(self, api_client, make_user):
        near = self._chef_at(make_user, 'near@test.com', 40.7200, -74.0000)
        self._chef_at(make_user, 'far@test.com', 41.5, -74.0)
        self._chef_at(make_user, 'resting@test.com', 40.7150, -74.0050, is_active=False)

        resp = api_client.get(reverse('chefs:nearby_chefs'), {'lat': '40.7128', 'lng': '-74.0060'})
        assert resp.status_code == 200
        body = resp.json()
        assert body['count'] == 1
        assert body['data'][0]['id'] == near.pk
        assert body['data'][0]['distanceKm'] < 10

    def test_distance_widens_search(self, api_client, make_user):
        self._chef_at(make_user, 'far@test.com', 41.5, -74.0)
        resp = api_client.get(
            reverse('chefs:nearby_chefs'), {'lat': '40.7128', 'lng': '-74.0060', 'distance': '100'}
        )
        assert resp.json()['count'] == 1
