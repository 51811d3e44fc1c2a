# chefs/views.py
import logging

from django.utils.dateparse import parse_date
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticatedOrReadOnly

from custom_auth.permissions import authorize
from menus.serializers import MenuItemSerializer
from shared.exceptions import AuthorizationError, ValidationError
from shared.pydantic_models import validate_payload
from shared.responses import success_response
from shared.utils import get_or_not_found

from .geo import chefs_near, distance_km, latitude_bounds
from .models import Chef
from .pydantic_models import ChefUpdatePayload, NearbyQuery
from .serializers import ChefSerializer

logger = logging.getLogger(__name__)

# Payload attribute -> model field. rating and ratings_count only change through reviews.
OWNER_EDITABLE_FIELDS = {
    'bio': 'bio',
    'specialties': 'specialties',
    'profile_image': 'profile_image',
    'service_radius': 'service_radius_km',
    'is_active': 'is_active',
}


def _chefs():
    return Chef.objects.select_related('user')


@api_view(['GET'])
@permission_classes([AllowAny])
def chef_list(request):
    data = ChefSerializer(_chefs(), many=True).data
    return success_response(data, count=len(data))


@api_view(['GET'])
@permission_classes([AllowAny])
def nearby_chefs(request):
    params = request.query_params
    if not params.get('lat') or not params.get('lng'):
        raise ValidationError('Please provide latitude and longitude')
    query = validate_payload(NearbyQuery, {
        'lat': params.get('lat'),
        'lng': params.get('lng'),
        'distance': params.get('distance') or 10,
    })

    low, high = latitude_bounds(query.lat, query.distance)
    candidates = _chefs().filter(
        is_active=True,
        user__latitude__isnull=False,
        user__longitude__isnull=False,
        user__latitude__gte=low,
        user__latitude__lte=high,
    )
    chefs = chefs_near(candidates, query.lat, query.lng, query.distance)

    data = []
    for chef in chefs:
        item = ChefSerializer(chef).data
        item['distanceKm'] = round(
            distance_km(query.lat, query.lng, float(chef.user.latitude), float(chef.user.longitude)), 2
        )
        data.append(item)
    data.sort(key=lambda item: item['distanceKm'])
    return success_response(data, count=len(data))


@api_view(['GET', 'PUT'])
@permission_classes([IsAuthenticatedOrReadOnly])
def chef_detail(request, chef_id):
    chef = get_or_not_found(_chefs(), chef_id, 'Chef')

    if request.method == 'GET':
        data = ChefSerializer(chef).data
        data['menus'] = MenuItemSerializer(chef.menu_items.all(), many=True).data
        return success_response(data)

    authorize(
        request.user,
        roles=('admin',),
        owner_id=chef.user_id,
        message=f'User {request.user.id} is not authorized to update this profile',
    )
    payload = validate_payload(ChefUpdatePayload, request.data)

    updated = []
    for attr, field in OWNER_EDITABLE_FIELDS.items():
        value = getattr(payload, attr)
        if value is not None:
            setattr(chef, field, value)
            updated.append(field)
    if payload.delivery_options is not None:
        if payload.delivery_options.delivery is not None:
            chef.offers_delivery = payload.delivery_options.delivery
            updated.append('offers_delivery')
        if payload.delivery_options.pickup is not None:
            chef.offers_pickup = payload.delivery_options.pickup
            updated.append('offers_pickup')
    if payload.is_verified is not None:
        if not request.user.is_admin:
            raise AuthorizationError('Only admins can change verification status', status_code=403)
        chef.is_verified = payload.is_verified
        updated.append('is_verified')

    if updated:
        chef.save(update_fields=updated + ['updated_at'])
        logger.info("Chef %s updated fields %s", chef.pk, ", ".join(updated))
    return success_response(ChefSerializer(chef).data)


@api_view(['GET'])
@permission_classes([AllowAny])
def chef_menus(request, chef_id):
    chef = get_or_not_found(Chef.objects.all(), chef_id, 'Chef')
    menus = chef.menu_items.filter(is_available=True)

    raw_date = request.query_params.get('date')
    if raw_date:
        try:
            day = parse_date(raw_date)
        except ValueError:
            day = None
        if day is None:
            raise ValidationError('date must be formatted YYYY-MM-DD')
        menus = menus.filter(available_date=day)

    data = MenuItemSerializer(menus, many=True).data
    return success_response(data, count=len(data))
