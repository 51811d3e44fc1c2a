# menus/views.py
import logging

from django.utils import timezone
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticatedOrReadOnly

from chefs.models import Chef
from custom_auth.permissions import IsChefOrReadOnly, authorize
from shared.exceptions import AuthorizationError
from shared.pydantic_models import validate_payload
from shared.responses import success_response
from shared.utils import get_or_not_found

from .models import MenuItem
from .pydantic_models import MenuItemCreatePayload, MenuItemUpdatePayload
from .serializers import MenuItemSerializer

logger = logging.getLogger(__name__)

PLAIN_FIELDS = (
    'title', 'description', 'image', 'price', 'category', 'cuisine', 'ingredients',
    'preparation_time', 'available_date', 'available_quantity', 'is_available',
)
DIETARY_FIELDS = ('vegetarian', 'vegan', 'gluten_free', 'dairy_free', 'nut_free')
# Query string flag -> model field
DIETARY_FILTERS = {'vegetarian': 'vegetarian', 'vegan': 'vegan', 'glutenFree': 'gluten_free'}


def _menu_items():
    return MenuItem.objects.select_related('chef__user')


def _apply_dietary(item, dietary):
    changed = []
    if dietary is None:
        return changed
    for field in DIETARY_FIELDS:
        value = getattr(dietary, field)
        if value is not None:
            setattr(item, field, value)
            changed.append(field)
    return changed


@api_view(['GET', 'POST'])
@permission_classes([IsChefOrReadOnly])
def menu_list(request):
    if request.method == 'POST':
        return _create_menu_item(request)

    items = _menu_items().filter(is_available=True, available_date=timezone.localdate())
    params = request.query_params
    if params.get('cuisine'):
        items = items.filter(cuisine__iexact=params['cuisine'])
    if params.get('category'):
        items = items.filter(category=params['category'])
    for flag, field in DIETARY_FILTERS.items():
        if params.get(flag) == 'true':
            items = items.filter(**{field: True})

    data = MenuItemSerializer(items, many=True).data
    return success_response(data, count=len(data))


def _create_menu_item(request):
    chef = Chef.objects.filter(user=request.user).first()
    if chef is None:
        raise AuthorizationError('Only chefs can create menu items', status_code=status.HTTP_403_FORBIDDEN)

    payload = validate_payload(MenuItemCreatePayload, request.data)
    item = MenuItem(chef=chef)
    for field in PLAIN_FIELDS:
        setattr(item, field, getattr(payload, field))
    _apply_dietary(item, payload.dietary_info)
    item.save()

    logger.info("Chef %s created menu item %s for %s", chef.pk, item.pk, item.available_date)
    return success_response(MenuItemSerializer(item).data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'DELETE'])
@permission_classes([IsAuthenticatedOrReadOnly])
def menu_detail(request, menu_id):
    item = get_or_not_found(_menu_items(), menu_id, 'Menu item')
    if request.method == 'GET':
        return success_response(MenuItemSerializer(item).data)

    action = 'update' if request.method == 'PUT' else 'delete'
    authorize(
        request.user,
        owner_id=item.chef.user_id,
        message=f'User {request.user.id} is not authorized to {action} this menu item',
    )

    if request.method == 'DELETE':
        item.delete()
        logger.info("Menu item %s deleted by user %s", menu_id, request.user.id)
        return success_response()

    payload = validate_payload(MenuItemUpdatePayload, request.data)
    changed = []
    for field in PLAIN_FIELDS:
        value = getattr(payload, field)
        if value is not None:
            setattr(item, field, value)
            changed.append(field)
    changed += _apply_dietary(item, payload.dietary_info)

    if changed:
        item.save(update_fields=changed + ['updated_at'])
    return success_response(MenuItemSerializer(item).data)
