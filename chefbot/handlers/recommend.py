"""Menu recommendations under a fixed price ceiling."""

import logging
from collections.abc import Callable, Iterable
from itertools import groupby

from chefbot.models import (
    CommandResult,
    CommandStatus,
    Recommendation,
    Restaurant,
    format_amount,
)
from chefbot.services import ActivityLog

logger = logging.getLogger(__name__)

PRICE_CEILING = 500.0

KEYWORD_PROMPT = (
    "Enter item keyword (burger, pizza, pasta, wrap, sandwich) "
    "or press Enter for all: "
)


def find_recommendations(
    restaurants: Iterable[Restaurant],
    keyword: str = "",
    ceiling: float = PRICE_CEILING,
) -> list[Recommendation]:
    """Find every item priced at or under the ceiling whose name contains keyword.

    Args:
        restaurants: Restaurants in catalog order
        keyword: Case-insensitive substring filter; empty matches everything
        ceiling: Maximum price, inclusive

    Returns:
        Matches ordered by restaurant, then category, then menu position
    """
    wanted = keyword.lower()
    matches = []
    for restaurant in restaurants:
        for category in restaurant.categories:
            for item in restaurant.items(category):
                if item.price > ceiling:
                    continue
                if wanted and wanted not in item.name.lower():
                    continue
                matches.append(
                    Recommendation(
                        restaurant_name=restaurant.name, category=category, item=item
                    )
                )
    return matches


def render_recommendations(
    matches: list[Recommendation], keyword: str, ceiling: float
) -> str:
    header = f" RECOMMENDATIONS UNDER Rs {format_amount(ceiling)}"
    if keyword:
        header += f" (Keyword: {keyword})"
    output = ["", header + ":", "-" * 50]

    if not matches:
        no_match = f" No matching items found under Rs {format_amount(ceiling)}"
        if keyword:
            no_match += f" with keyword '{keyword}'"
        output.append(no_match + ".")
        return "\n".join(output)

    for restaurant_name, group in groupby(matches, key=lambda m: m.restaurant_name):
        output.append("")
        output.append(f" {restaurant_name}:")
        for match in group:
            output.append(
                f"   • {match.item.name} ({match.category}) - Rs {format_amount(match.item.price)}"
            )

    output.append("-" * 50)
    output.append(" Use 'order' command to place an order!")
    return "\n".join(output)


def recommend(
    restaurants: Iterable[Restaurant],
    activity_log: ActivityLog,
    ask: Callable[[str], str],
    keyword: str | None = None,
) -> CommandResult:
    """Recommend items under the price ceiling.

    Args:
        restaurants: Restaurants in catalog order
        activity_log: Log receiving successful queries
        ask: Shows a prompt and returns the user's answer
        keyword: Item filter; None prompts the user for one

    Returns:
        CommandResult listing the matches, or NOT_FOUND when nothing matched
    """
    if keyword is None:
        keyword = ask(KEYWORD_PROMPT).strip()

    matches = find_recommendations(restaurants, keyword, PRICE_CEILING)
    message = render_recommendations(matches, keyword, PRICE_CEILING)

    if not matches:
        return CommandResult(status=CommandStatus.NOT_FOUND, message=message)

    # A failed write is not reported to the user
    activity_log.log_recommendation(keyword, PRICE_CEILING)
    return CommandResult(status=CommandStatus.OK, message=message, recommendations=matches)
