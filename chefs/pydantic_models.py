# chefs/pydantic_models.py
from typing import Optional

from pydantic import Field

from shared.pydantic_models import CamelModel


class DeliveryOptionsPayload(CamelModel):
    delivery: Optional[bool] = None
    pickup: Optional[bool] = None


class ChefUpdatePayload(CamelModel):
    bio: Optional[str] = Field(default=None, max_length=500)
    specialties: Optional[list[str]] = None
    profile_image: Optional[str] = Field(default=None, max_length=500)
    delivery_options: Optional[DeliveryOptionsPayload] = None
    service_radius: Optional[int] = Field(default=None, ge=1, le=500)
    is_active: Optional[bool] = None
    # admin only
    is_verified: Optional[bool] = None


class NearbyQuery(CamelModel):
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
    distance: float = Field(default=10, gt=0, le=20000, description="Search radius in km")
