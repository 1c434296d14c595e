"""Restaurant and menu data models."""

import logging
from collections.abc import Callable
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

logger = logging.getLogger(__name__)

# Opening hours shared by every restaurant (noon through 11 PM inclusive)
OPENING_HOUR = 12
CLOSING_HOUR = 23
OPENING_HOURS_TEXT = "12 PM - 11 PM"


class OpeningStatus(str, Enum):
    """Result of checking the opening hours against the clock."""

    OPEN = "open"
    CLOSED = "closed"
    CLOCK_ERROR = "clock_error"


def current_hour(clock: Callable[[], datetime] = datetime.now) -> int | None:
    """Read the current local hour.

    Args:
        clock: Callable returning the current local time

    Returns:
        Hour of the day (0-23), or None if the clock could not be read
    """
    try:
        return clock().hour
    except (OSError, OverflowError, ValueError) as e:
        logger.error(f"Error getting current time: {e}")
        return None


class MenuItem(BaseModel):
    """A single item on a restaurant's menu."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Item name")
    price: float = Field(..., ge=0, description="Item price in Rs")


class Restaurant(BaseModel):
    """Restaurant profile with branches and a categorized menu.

    Branches and addresses are parallel: index i in both refers to the same
    physical branch.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Restaurant name")
    branches: tuple[str, ...] = Field(..., description="Branch names")
    addresses: tuple[str, ...] = Field(..., description="Branch addresses")
    rating: float = Field(..., ge=0, le=5, description="Rating out of 5")
    menu: dict[str, tuple[MenuItem, ...]] = Field(
        default_factory=dict, description="Menu items keyed by category"
    )

    @field_validator("menu")
    @classmethod
    def sort_categories(
        cls, menu: dict[str, tuple[MenuItem, ...]]
    ) -> dict[str, tuple[MenuItem, ...]]:
        """Keep categories in ascending name order."""
        return {category: menu[category] for category in sorted(menu)}

    @model_validator(mode="after")
    def check_branch_addresses(self) -> "Restaurant":
        """Every branch must have exactly one address."""
        if len(self.branches) != len(self.addresses):
            raise ValueError(
                f"{self.name} has {len(self.branches)} branches "
                f"but {len(self.addresses)} addresses"
            )
        return self

    @property
    def categories(self) -> list[str]:
        return list(self.menu)

    def items(self, category: str) -> tuple[MenuItem, ...]:
        return self.menu.get(category, ())

    def find_category(self, category: str) -> str | None:
        """Find a menu category by exact, case-insensitive name.

        Args:
            category: Category name as typed by the user

        Returns:
            The category as stored in the menu, or None if not found
        """
        wanted = category.lower()
        for name in self.menu:
            if name.lower() == wanted:
                return name
        return None

    def find_item(self, category: str, item_name: str) -> MenuItem | None:
        """Find an item in a category by exact, case-insensitive name."""
        wanted = item_name.lower()
        for item in self.items(category):
            if item.name.lower() == wanted:
                return item
        return None

    def branch_locations(self) -> list[tuple[str, str]]:
        """Pair each branch with its address."""
        return list(zip(self.branches, self.addresses))

    def is_open_at(self, hour: int) -> bool:
        return OPENING_HOUR <= hour <= CLOSING_HOUR

    def opening_status(self, clock: Callable[[], datetime] = datetime.now) -> OpeningStatus:
        """Check the opening hours against the current local hour.

        Args:
            clock: Callable returning the current local time

        Returns:
            OPEN or CLOSED, or CLOCK_ERROR when the clock could not be read
        """
        hour = current_hour(clock)
        if hour is None:
            return OpeningStatus.CLOCK_ERROR
        return OpeningStatus.OPEN if self.is_open_at(hour) else OpeningStatus.CLOSED
