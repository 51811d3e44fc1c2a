from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class Chef(models.Model):
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name='chef_profile')
    bio = models.TextField(max_length=500, blank=True)
    specialties = models.JSONField(default=list, blank=True)
    profile_image = models.CharField(max_length=500, blank=True, default='default-chef.jpg')
    # Running mean of every review rating; the default carries no weight once reviews exist
    rating = models.FloatField(default=5, validators=[MinValueValidator(1), MaxValueValidator(5)])
    ratings_count = models.PositiveIntegerField(default=0)
    is_verified = models.BooleanField(default=False, help_text="Admin approval for platform listing")
    is_active = models.BooleanField(default=True, help_text="Accepting orders and listed in nearby search")
    offers_delivery = models.BooleanField(default=True)
    offers_pickup = models.BooleanField(default=True)
    service_radius_km = models.PositiveIntegerField(default=10)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = 'chefs'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['is_active'], name='chef_is_active_idx'),
        ]

    def __str__(self):
        return str(self.user) if self.user_id else f"Chef #{self.pk}"

    @property
    def delivery_options(self):
        return {'delivery': self.offers_delivery, 'pickup': self.offers_pickup}

    def apply_rating(self, rating):
        """Fold one review rating into the running mean. Caller saves."""
        total = self.rating * self.ratings_count + rating
        self.ratings_count += 1
        self.rating = total / self.ratings_count
