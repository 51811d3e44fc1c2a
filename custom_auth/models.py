# custom_auth/models.py

from django.contrib.auth.models import AbstractUser
from django.db import models


class CustomUser(AbstractUser):
    ROLE_USER = 'user'
    ROLE_CHEF = 'chef'
    ROLE_ADMIN = 'admin'
    ROLE_CHOICES = [
        (ROLE_USER, 'User'),
        (ROLE_CHEF, 'Chef'),
        (ROLE_ADMIN, 'Admin'),
    ]

    email = models.EmailField(unique=True)
    name = models.CharField(max_length=150, blank=True)
    phone_number = models.CharField(max_length=20, blank=True)
    role = models.CharField(max_length=10, choices=ROLE_CHOICES, default=ROLE_USER)

    # Location the user orders from (or cooks at, for chefs)
    street_address = models.CharField(max_length=255, blank=True)
    latitude = models.DecimalField(max_digits=9, decimal_places=6, null=True, blank=True)
    longitude = models.DecimalField(max_digits=9, decimal_places=6, null=True, blank=True)

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['username']

    def save(self, *args, **kwargs):
        if self.email:
            self.email = self.email.strip().lower()
        if not self.username:
            self.username = self.email
        super().save(*args, **kwargs)

    @property
    def is_admin(self):
        return self.role == self.ROLE_ADMIN or self.is_superuser

    @property
    def effective_role(self):
        """Role used by permission checks; superusers always act as admins."""
        return self.ROLE_ADMIN if self.is_admin else self.role

    @property
    def has_coordinates(self):
        return self.latitude is not None and self.longitude is not None

    @property
    def location(self):
        coordinates = None
        if self.has_coordinates:
            coordinates = [float(self.longitude), float(self.latitude)]
        return {'address': self.street_address, 'coordinates': coordinates}

    def __str__(self):
        return self.name or self.email
