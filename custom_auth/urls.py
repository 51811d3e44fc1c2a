from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView

from . import views

app_name = 'custom_auth'

urlpatterns = [
    path('register', views.register, name='register'),
    path('login', views.login, name='login'),
    path('me', views.me, name='me'),
    path('logout', views.logout, name='logout'),
    path('token/refresh', TokenRefreshView.as_view(), name='token_refresh'),
]
