"""Command handlers for each ChefBot intent."""

from chefbot.handlers.branches import find_branches, nearest_branch
from chefbot.handlers.guide import not_understood, show_help, tell_me_about_unclear
from chefbot.handlers.info import show_all, show_by_field, show_restaurants
from chefbot.handlers.ordering import OrderFlow, OrderStage, build_order
from chefbot.handlers.recommend import (
    PRICE_CEILING,
    find_recommendations,
    recommend,
)
from chefbot.handlers.status import check_open_status

__all__ = [
    # Classes
    "OrderFlow",
    "OrderStage",
    # Handlers
    "check_open_status",
    "nearest_branch",
    "not_understood",
    "recommend",
    "show_all",
    "show_by_field",
    "show_help",
    "show_restaurants",
    "tell_me_about_unclear",
    # Queries
    "PRICE_CEILING",
    "build_order",
    "find_branches",
    "find_recommendations",
]
