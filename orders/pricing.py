"""Order price computation. Pure functions over Decimal amounts."""
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Tuple

from django.conf import settings

CENT = Decimal('0.01')


def _setting_decimal(name, default):
    return Decimal(str(getattr(settings, name, default)))


def tax_rate() -> Decimal:
    return _setting_decimal('ORDER_TAX_RATE', '0.10')


def standard_delivery_fee() -> Decimal:
    return _setting_decimal('ORDER_DELIVERY_FEE', '5.00')


def to_cents(amount: Decimal) -> Decimal:
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class OrderPricing:
    subtotal: Decimal
    tax: Decimal
    delivery_fee: Decimal
    total: Decimal


def delivery_fee_for(delivery_option: str, chef_offers_delivery: bool) -> Decimal:
    """The flat fee applies only to delivery orders from chefs who deliver."""
    if delivery_option == 'delivery' and chef_offers_delivery:
        return standard_delivery_fee()
    return Decimal('0.00')


def price_order(lines: Iterable[Tuple[Decimal, int]], delivery_option: str, chef_offers_delivery: bool) -> OrderPricing:
    """
    Price a cart given ``(unit_price, quantity)`` pairs.

    subtotal is the sum of line totals, tax is subtotal times the tax rate
    rounded half-up to cents, and total = subtotal + tax + delivery fee.
    """
    subtotal = sum((Decimal(price) * quantity for price, quantity in lines), Decimal('0'))
    subtotal = to_cents(subtotal)
    tax = to_cents(subtotal * tax_rate())
    fee = to_cents(delivery_fee_for(delivery_option, chef_offers_delivery))
    return OrderPricing(subtotal=subtotal, tax=tax, delivery_fee=fee, total=subtotal + tax + fee)
