# menus/pydantic_models.py
from datetime import date
from decimal import Decimal
from typing import Annotated, Literal, Optional

from pydantic import Field

from shared.pydantic_models import CamelModel

Category = Literal["breakfast", "lunch", "dinner", "snacks", "dessert", "beverage", "other"]
Price = Annotated[Decimal, Field(gt=0, max_digits=8, decimal_places=2)]
Title = Annotated[str, Field(min_length=1, max_length=100)]
Cuisine = Annotated[str, Field(min_length=1, max_length=100)]
Description = Annotated[str, Field(min_length=1)]
Image = Annotated[str, Field(max_length=500)]
Minutes = Annotated[int, Field(gt=0)]
Stock = Annotated[int, Field(ge=0)]


class DietaryInfoPayload(CamelModel):
    vegetarian: Optional[bool] = None
    vegan: Optional[bool] = None
    gluten_free: Optional[bool] = None
    dairy_free: Optional[bool] = None
    nut_free: Optional[bool] = None


class MenuItemCreatePayload(CamelModel):
    title: Title
    description: Description
    image: Image = "default-food.jpg"
    price: Price
    category: Category
    cuisine: Cuisine
    dietary_info: DietaryInfoPayload = Field(default_factory=DietaryInfoPayload)
    ingredients: list[str] = Field(default_factory=list)
    preparation_time: Minutes
    available_date: date
    available_quantity: Stock
    is_available: bool = True


class MenuItemUpdatePayload(CamelModel):
    title: Optional[Title] = None
    description: Optional[Description] = None
    image: Optional[Image] = None
    price: Optional[Price] = None
    category: Optional[Category] = None
    cuisine: Optional[Cuisine] = None
    dietary_info: Optional[DietaryInfoPayload] = None
    ingredients: Optional[list[str]] = None
    preparation_time: Optional[Minutes] = None
    available_date: Optional[date] = None
    available_quantity: Optional[Stock] = None
    is_available: Optional[bool] = None
