import django.core.validators
import django.db.models.deletion
from decimal import Decimal
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('chefs', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='MenuItem',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=100)),
                ('description', models.TextField()),
                ('image', models.CharField(blank=True, default='default-food.jpg', max_length=500)),
                ('price', models.DecimalField(decimal_places=2, max_digits=8, validators=[django.core.validators.MinValueValidator(Decimal('0.01'))])),
                ('category', models.CharField(choices=[('breakfast', 'Breakfast'), ('lunch', 'Lunch'), ('dinner', 'Dinner'), ('snacks', 'Snacks'), ('dessert', 'Dessert'), ('beverage', 'Beverage'), ('other', 'Other')], max_length=20)),
                ('cuisine', models.CharField(max_length=100)),
                ('vegetarian', models.BooleanField(default=False)),
                ('vegan', models.BooleanField(default=False)),
                ('gluten_free', models.BooleanField(default=False)),
                ('dairy_free', models.BooleanField(default=False)),
                ('nut_free', models.BooleanField(default=False)),
                ('ingredients', models.JSONField(blank=True, default=list)),
                ('preparation_time', models.PositiveIntegerField(help_text='Minutes')),
                ('available_date', models.DateField()),
                ('available_quantity', models.PositiveIntegerField()),
                ('is_available', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('chef', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='menu_items', to='chefs.chef')),
            ],
            options={
                'ordering': ['available_date', 'id'],
                'indexes': [models.Index(fields=['chef', 'available_date'], name='menuitem_chef_date_idx')],
            },
        ),
    ]
