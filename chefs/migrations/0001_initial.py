import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Chef',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('bio', models.TextField(blank=True, max_length=500)),
                ('specialties', models.JSONField(blank=True, default=list)),
                ('profile_image', models.CharField(blank=True, default='default-chef.jpg', max_length=500)),
                ('rating', models.FloatField(default=5, validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(5)])),
                ('ratings_count', models.PositiveIntegerField(default=0)),
                ('is_verified', models.BooleanField(default=False, help_text='Admin approval for platform listing')),
                ('is_active', models.BooleanField(default=True, help_text='Accepting orders and listed in nearby search')),
                ('offers_delivery', models.BooleanField(default=True)),
                ('offers_pickup', models.BooleanField(default=True)),
                ('service_radius_km', models.PositiveIntegerField(default=10)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.PROTECT, related_name='chef_profile', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-created_at', '-id'],
                'indexes': [models.Index(fields=['is_active'], name='chef_is_active_idx')],
            },
        ),
    ]
