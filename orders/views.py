# orders/views.py
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes, throttle_classes
from rest_framework.permissions import IsAuthenticated

from custom_auth.permissions import IsChefOrAdmin, IsCustomer
from custom_auth.throttles import AuthenticatedBurstThrottle
from shared.pydantic_models import validate_payload
from shared.responses import success_response

from . import services
from .pydantic_models import CreateOrderCommand, ReviewCommand, StatusUpdateCommand
from .serializers import OrderSerializer


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
@throttle_classes([AuthenticatedBurstThrottle])
def order_list(request):
    if request.method == 'POST':
        command = validate_payload(CreateOrderCommand, request.data)
        order = services.create_order(request.user, command)
        return success_response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    data = OrderSerializer(services.orders_visible_to(request.user), many=True).data
    return success_response(data, count=len(data))


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def order_detail(request, order_id):
    order = services.get_order_for(request.user, order_id)
    return success_response(OrderSerializer(order).data)


@api_view(['PUT'])
@permission_classes([IsChefOrAdmin])
@throttle_classes([AuthenticatedBurstThrottle])
def order_status(request, order_id):
    command = validate_payload(StatusUpdateCommand, request.data)
    order = services.update_order_status(request.user, order_id, command.status)
    return success_response(OrderSerializer(order).data)


@api_view(['PUT'])
@permission_classes([IsCustomer])
@throttle_classes([AuthenticatedBurstThrottle])
def order_review(request, order_id):
    command = validate_payload(ReviewCommand, request.data)
    order = services.add_order_review(request.user, order_id, command.rating, command.review)
    return success_response(OrderSerializer(order).data)
