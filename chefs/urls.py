from django.urls import path

from . import views

app_name = 'chefs'

urlpatterns = [
    path('chefs', views.chef_list, name='chef_list'),
    path('chefs/nearby', views.nearby_chefs, name='nearby_chefs'),
    path('chefs/<int:chef_id>', views.chef_detail, name='chef_detail'),
    path('chefs/<int:chef_id>/menus', views.chef_menus, name='chef_menus'),
]
