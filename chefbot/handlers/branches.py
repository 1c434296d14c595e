"""Branch finder: list branches whose address mentions a city."""

import logging
from collections.abc import Callable, Iterable
from itertools import groupby

from chefbot.models import BranchMatch, CommandResult, CommandStatus, Restaurant

logger = logging.getLogger(__name__)

SUPPORTED_CITIES = "Islamabad, Lahore"


def find_branches(restaurants: Iterable[Restaurant], city: str) -> list[BranchMatch]:
    """Find branches whose address contains the city, case-insensitively."""
    wanted = city.lower()
    return [
        BranchMatch(restaurant_name=restaurant.name, branch=branch, address=address)
        for restaurant in restaurants
        for branch, address in restaurant.branch_locations()
        if wanted in address.lower()
    ]


def nearest_branch(
    restaurants: Iterable[Restaurant], ask: Callable[[str], str]
) -> CommandResult:
    """Ask for a city and list the branches located there.

    Args:
        restaurants: Restaurants in catalog order
        ask: Shows a prompt and returns the user's answer

    Returns:
        CommandResult grouped by restaurant, or NOT_FOUND with supported cities
    """
    prompt = ["", " BRANCH FINDER", "-" * 20, "Enter city name (e.g., Islamabad, Lahore): "]
    city = ask("\n".join(prompt))

    matches = find_branches(restaurants, city)
    output = ["", f" Branches in {city}:", "-" * 30]

    if not matches:
        logger.info(f"No branches found for city: {city}")
        output.append(f" No branches found in '{city}'.")
        output.append(f"Available cities: {SUPPORTED_CITIES}")
        return CommandResult(status=CommandStatus.NOT_FOUND, message="\n".join(output))

    for restaurant_name, group in groupby(matches, key=lambda m: m.restaurant_name):
        output.append("")
        output.append(f" {restaurant_name}:")
        for match in group:
            output.append(f"   • {match.branch} Branch")
            output.append(f"     {match.address}")

    return CommandResult(
        status=CommandStatus.OK, message="\n".join(output), branches=matches
    )
