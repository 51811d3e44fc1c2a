from django.urls import path

from . import views

app_name = 'orders'

urlpatterns = [
    path('orders', views.order_list, name='order_list'),
    path('orders/<int:order_id>', views.order_detail, name='order_detail'),
    path('orders/<int:order_id>/status', views.order_status, name='order_status'),
    path('orders/<int:order_id>/review', views.order_review, name='order_review'),
]
