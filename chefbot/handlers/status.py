"""Opening status handler."""

import logging
from collections.abc import Callable
from datetime import datetime

from chefbot.models import CommandResult, CommandStatus, OpeningStatus
from chefbot.models.restaurant import OPENING_HOURS_TEXT
from chefbot.services import RestaurantService

logger = logging.getLogger(__name__)


def check_open_status(
    restaurant_service: RestaurantService,
    restaurant_name: str | None,
    clock: Callable[[], datetime] = datetime.now,
) -> CommandResult:
    """Report whether a restaurant is open at the current hour.

    Args:
        restaurant_service: Catalog to look the restaurant up in
        restaurant_name: Restaurant to check; None asks the user to name one
        clock: Callable returning the current local time

    Returns:
        CommandResult with OPEN/CLOSED, a clarification or a lookup error
    """
    available = ", ".join(restaurant_service.names)

    if restaurant_name is None:
        output = [
            " Please specify which restaurant's opening status you want to check.",
            f"Available: {available}",
            "Example: 'cheezious open now'",
        ]
        return CommandResult(status=CommandStatus.CLARIFY, message="\n".join(output))

    restaurant = restaurant_service.find_restaurant(restaurant_name)
    if restaurant is None:
        output = [
            f" '{restaurant_name}' is not a recognized restaurant.",
            f"Available restaurants: {available}",
        ]
        return CommandResult(status=CommandStatus.NOT_FOUND, message="\n".join(output))

    output = ["", " OPENING STATUS:", "-" * 20]

    status = restaurant.opening_status(clock)
    if status == OpeningStatus.CLOCK_ERROR:
        output.append("Error getting current time.")

    if status == OpeningStatus.OPEN:
        output.append(f" {restaurant.name} is OPEN now! ({OPENING_HOURS_TEXT})")
    else:
        output.append(f" {restaurant.name} is CLOSED now.")
        output.append(f"Opening hours: {OPENING_HOURS_TEXT}")

    return CommandResult(status=CommandStatus.OK, message="\n".join(output))
