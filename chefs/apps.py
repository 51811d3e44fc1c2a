from django.apps import AppConfig


class ChefsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'chefs'
