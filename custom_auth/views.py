# custom_auth/views.py
import logging

from django.contrib.auth import authenticate, get_user_model
from django.db import IntegrityError, transaction
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes, throttle_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken

from chefs.models import Chef
from chefs.serializers import ChefSerializer
from shared.exceptions import AuthenticationError, ValidationError
from shared.pydantic_models import validate_payload
from shared.responses import success_response

from .models import CustomUser
from .pydantic_models import LoginPayload, LogoutPayload, RegisterPayload
from .serializers import UserSerializer
from .throttles import LoginThrottle

logger = logging.getLogger(__name__)


def _token_response(user, status_code=status.HTTP_200_OK):
    refresh = RefreshToken.for_user(user)
    return Response({
        'success': True,
        'token': str(refresh.access_token),
        'refresh': str(refresh),
        'user': UserSerializer(user).data,
    }, status=status_code)


@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    payload = validate_payload(RegisterPayload, request.data)
    User = get_user_model()
    if User.objects.filter(email__iexact=payload.email).exists():
        raise ValidationError('Email is already registered')

    geo = payload.location.geo() if payload.location else None
    try:
        with transaction.atomic():
            user = User(
                email=payload.email,
                username=payload.email,
                name=payload.name,
                phone_number=payload.phone,
                role=payload.role,
                street_address=payload.location.address if payload.location else '',
                latitude=geo.latitude if geo else None,
                longitude=geo.longitude if geo else None,
            )
            user.set_password(payload.password)
            user.save()
            if user.role == CustomUser.ROLE_CHEF:
                Chef.objects.create(user=user, bio=payload.bio, specialties=payload.specialties)
    except IntegrityError:
        raise ValidationError('Email is already registered')

    logger.info("Registered %s account %s", user.role, user.pk)
    return _token_response(user, status_code=status.HTTP_201_CREATED)


@api_view(['POST'])
@permission_classes([AllowAny])
@throttle_classes([LoginThrottle])
def login(request):
    payload = validate_payload(LoginPayload, request.data)
    if not payload.email or not payload.password:
        raise ValidationError('Please provide an email and password')

    user = authenticate(request, username=payload.email, password=payload.password)
    if user is None:
        logger.warning("Failed login for %s", payload.email)
        raise AuthenticationError('Invalid credentials')
    return _token_response(user)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def me(request):
    user = request.user
    data = UserSerializer(user).data
    if user.role == CustomUser.ROLE_CHEF:
        chef = Chef.objects.filter(user=user).first()
        data['chefProfile'] = ChefSerializer(chef).data if chef else None
    return success_response(data)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def logout(request):
    payload = validate_payload(LogoutPayload, request.data)
    if payload.refresh:
        try:
            RefreshToken(payload.refresh).blacklist()
        except TokenError:
            raise ValidationError('Invalid token')
    return success_response()
