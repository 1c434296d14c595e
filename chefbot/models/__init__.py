"""Data models for the ChefBot system."""

from chefbot.models.intent import CommandResult, CommandStatus, Intent, IntentType
from chefbot.models.order import (
    TAX_RATE,
    BranchMatch,
    Order,
    OrderStatus,
    Recommendation,
    format_amount,
)
from chefbot.models.restaurant import MenuItem, OpeningStatus, Restaurant

__all__ = [
    "TAX_RATE",
    "BranchMatch",
    "CommandResult",
    "CommandStatus",
    "Intent",
    "IntentType",
    "MenuItem",
    "OpeningStatus",
    "Order",
    "OrderStatus",
    "Recommendation",
    "Restaurant",
    "format_amount",
]
