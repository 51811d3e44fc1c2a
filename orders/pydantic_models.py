# orders/pydantic_models.py
from typing import Annotated, Literal, Optional

from pydantic import Field, field_validator, model_validator

from shared.pydantic_models import CamelModel, Coordinates


class OrderLinePayload(CamelModel):
    menu: int = Field(..., gt=0, description="Menu item id")
    quantity: int = Field(..., ge=1, le=100)


class DeliveryAddressPayload(CamelModel):
    address: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100)
    zipcode: str = Field(..., min_length=1, max_length=20)
    coordinates: Optional[Coordinates] = None


class CreateOrderCommand(CamelModel):
    items: list[OrderLinePayload] = Field(default_factory=list)
    delivery_address: Optional[DeliveryAddressPayload] = None
    delivery_option: Literal["delivery", "pickup"] = "delivery"
    delivery_instructions: Optional[str] = Field(default="", max_length=500)
    payment_method: Literal["card", "cash"]

    @field_validator("delivery_instructions")
    @classmethod
    def _blank_instructions(cls, value):
        return value or ""

    @model_validator(mode="after")
    def _address_for_delivery(self):
        if self.delivery_option == "delivery" and self.delivery_address is None:
            raise ValueError("Please provide a delivery address")
        return self


class StatusUpdateCommand(CamelModel):
    status: Optional[str] = None


class ReviewCommand(CamelModel):
    # booleans are not ratings
    rating: Optional[Annotated[int, Field(ge=1, le=5, strict=True)]] = None
    review: Optional[str] = Field(default="", max_length=1000)

    @field_validator("review")
    @classmethod
    def _blank_review(cls, value):
        return value or ""
