"""Restaurant information handlers: full details and per-field listings."""

import logging
from collections.abc import Iterable

from chefbot.models import CommandResult, CommandStatus, Restaurant, format_amount

logger = logging.getLogger(__name__)

VALID_FIELDS = ("name", "rating", "menu", "prices", "address", "branches")


def render_menu(restaurant: Restaurant) -> list[str]:
    """Render a restaurant's menu, one category header followed by its items."""
    output = []
    for category in restaurant.categories:
        output.append(f"  {category}:")
        for item in restaurant.items(category):
            output.append(f"   - {item.name}: Rs {format_amount(item.price)}")
    return output


def render_details(restaurant: Restaurant) -> str:
    """Render the full profile of a restaurant: rating, branches and menu."""
    output = ["", "=" * 50]
    output.append(f"  {restaurant.name} (Rating: {format_amount(restaurant.rating)}/5)")
    output.append("=" * 50)
    output.append(" Branches:")
    for branch, address in restaurant.branch_locations():
        output.append(f"   • {restaurant.name} {branch} - {address}")
    output.append("")
    output.append(" Menu:")
    output.extend(render_menu(restaurant))
    output.append("=" * 50)
    return "\n".join(output)


def show_all(restaurants: Iterable[Restaurant]) -> CommandResult:
    """Show full details for every restaurant in catalog order."""
    output = ["", " ALL RESTAURANTS INFORMATION:"]
    output.extend(render_details(restaurant) for restaurant in restaurants)
    return CommandResult(status=CommandStatus.OK, message="\n".join(output))


def show_restaurants(restaurants: Iterable[Restaurant]) -> CommandResult:
    """Show full details for the given restaurants."""
    message = "\n".join(render_details(restaurant) for restaurant in restaurants)
    return CommandResult(status=CommandStatus.OK, message=message)


def show_by_field(restaurants: Iterable[Restaurant], field: str) -> CommandResult:
    """Show one attribute of every restaurant.

    Args:
        restaurants: Restaurants in catalog order
        field: One of name, rating, menu, prices, address or branches

    Returns:
        CommandResult with the listing, or NOT_FOUND for an unknown field
    """
    output = [""]

    if field == "name":
        output.append(" RESTAURANT NAMES:")
        for restaurant in restaurants:
            output.append(f"   • {restaurant.name}")
    elif field == "rating":
        output.append(" RESTAURANT RATINGS:")
        for restaurant in restaurants:
            output.append(f"   • {restaurant.name}: {format_amount(restaurant.rating)}/5")
    elif field in ("menu", "prices"):
        output.append(" ALL RESTAURANT MENUS:")
        for restaurant in restaurants:
            output.append("")
            output.append(f"{restaurant.name}:")
            output.extend(render_menu(restaurant))
    elif field in ("address", "branches"):
        output.append(" RESTAURANT ADDRESSES:")
        for restaurant in restaurants:
            output.append("")
            output.append(f"{restaurant.name}:")
            for address in restaurant.addresses:
                output.append(f"   • {address}")
    else:
        logger.info(f"Unknown restaurant field requested: {field}")
        output.append(" Sorry, I don't understand that field.")
        output.append("Try: names, ratings, menu, addresses, or branches")
        return CommandResult(status=CommandStatus.NOT_FOUND, message="\n".join(output))

    return CommandResult(status=CommandStatus.OK, message="\n".join(output))
