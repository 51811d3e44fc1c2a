from django.urls import path

from . import views

app_name = 'menus'

urlpatterns = [
    path('menus', views.menu_list, name='menu_list'),
    path('menus/<int:menu_id>', views.menu_detail, name='menu_detail'),
]
