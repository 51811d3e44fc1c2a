from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from chefs.models import Chef


class MenuItem(models.Model):
    CATEGORY_BREAKFAST = 'breakfast'
    CATEGORY_LUNCH = 'lunch'
    CATEGORY_DINNER = 'dinner'
    CATEGORY_SNACKS = 'snacks'
    CATEGORY_DESSERT = 'dessert'
    CATEGORY_BEVERAGE = 'beverage'
    CATEGORY_OTHER = 'other'
    CATEGORY_CHOICES = [
        (CATEGORY_BREAKFAST, 'Breakfast'),
        (CATEGORY_LUNCH, 'Lunch'),
        (CATEGORY_DINNER, 'Dinner'),
        (CATEGORY_SNACKS, 'Snacks'),
        (CATEGORY_DESSERT, 'Dessert'),
        (CATEGORY_BEVERAGE, 'Beverage'),
        (CATEGORY_OTHER, 'Other'),
    ]

    chef = models.ForeignKey(Chef, on_delete=models.CASCADE, related_name='menu_items')
    title = models.CharField(max_length=100)
    description = models.TextField()
    image = models.CharField(max_length=500, blank=True, default='default-food.jpg')
    price = models.DecimalField(max_digits=8, decimal_places=2, validators=[MinValueValidator(Decimal('0.01'))])
    category = models.CharField(max_length=20, choices=CATEGORY_CHOICES)
    cuisine = models.CharField(max_length=100)

    # Dietary information
    vegetarian = models.BooleanField(default=False)
    vegan = models.BooleanField(default=False)
    gluten_free = models.BooleanField(default=False)
    dairy_free = models.BooleanField(default=False)
    nut_free = models.BooleanField(default=False)

    ingredients = models.JSONField(default=list, blank=True)
    preparation_time = models.PositiveIntegerField(help_text="Minutes")
    available_date = models.DateField()
    # Decremented by orders; hitting zero clears is_available
    available_quantity = models.PositiveIntegerField()
    is_available = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['available_date', 'id']
        indexes = [
            models.Index(fields=['chef', 'available_date'], name='menuitem_chef_date_idx'),
        ]

    def __str__(self):
        return f"{self.title} ({self.available_date})"

    @property
    def dietary_info(self):
        return {
            'vegetarian': self.vegetarian,
            'vegan': self.vegan,
            'glutenFree': self.gluten_free,
            'dairyFree': self.dairy_free,
            'nutFree': self.nut_free,
        }
