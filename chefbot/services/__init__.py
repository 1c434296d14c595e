"""Services backing the ChefBot handlers."""

from chefbot.services.activity_log import ActivityLog
from chefbot.services.restaurant_service import (
    RestaurantService,
    get_restaurant_service,
)

__all__ = ["ActivityLog", "RestaurantService", "get_restaurant_service"]
