"""
URL configuration for the homecook project.

All API routes live under ``/api/``; each app owns its own path segment.
"""
from django.contrib import admin
from django.http import HttpResponse
from django.urls import include, path


urlpatterns = [
    # Simple health check endpoint for load balancers and CI smoke tests
    path('healthz/', lambda request: HttpResponse('ok'), name='healthz'),
    path('admin/', admin.site.urls),
    path('api/auth/', include('custom_auth.urls')),
    path('api/', include('chefs.urls')),
    path('api/', include('menus.urls')),
    path('api/', include('orders.urls')),
]
