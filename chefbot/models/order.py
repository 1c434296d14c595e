"""Data models for orders, recommendations and branch lookups."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field

from chefbot.models.restaurant import MenuItem

# Flat tax applied at order confirmation
TAX_RATE = 0.15


def format_amount(amount: float) -> str:
    """Format a currency amount in its shortest decimal form (450, 67.5)."""
    return f"{amount:g}"


class OrderStatus(str, Enum):
    """Outcome of an order interaction."""

    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class Order(BaseModel):
    """A single-item order with its computed bill."""

    model_config = ConfigDict(frozen=True)

    restaurant_name: str = Field(..., description="Restaurant the order is for")
    item: MenuItem = Field(..., description="Ordered menu item")
    status: OrderStatus = Field(
        default=OrderStatus.CONFIRMED, description="Order outcome"
    )

    @computed_field
    @property
    def price(self) -> float:
        return self.item.price

    @computed_field
    @property
    def tax(self) -> float:
        return TAX_RATE * self.item.price

    @computed_field
    @property
    def total(self) -> float:
        return self.item.price + self.tax


class Recommendation(BaseModel):
    """A menu item that matched a recommendation query."""

    model_config = ConfigDict(frozen=True)

    restaurant_name: str
    category: str
    item: MenuItem


class BranchMatch(BaseModel):
    """A branch whose address matched a city search."""

    model_config = ConfigDict(frozen=True)

    restaurant_name: str
    branch: str
    address: str
