"""Restaurant catalog service backed by static data tables."""

import logging

from chefbot.models import MenuItem, Restaurant

logger = logging.getLogger(__name__)

# One literal table per supported restaurant, in catalog order
RESTAURANT_DATA: list[dict] = [
    {
        "name": "Cheezious",
        "branches": ("I-8", "G-10", "F-11"),
        "addresses": ("I-8 Islamabad", "G-10 Islamabad", "F-11 Islamabad"),
        "rating": 4.5,
        "menu": {
            "Burgers": [
                ("Zinger Burger", 450),
                ("Cheese Zinger", 480),
                ("Double Zinger", 650),
                ("Spicy Zinger", 500),
            ],
            "Pizzas": [
                ("Fajita Pizza", 900),
                ("Pepperoni Pizza", 950),
            ],
            "Pastas": [
                ("Creamy Pasta", 600),
                ("Spicy Pasta", 650),
            ],
        },
    },
    {
        "name": "Ranchers",
        "branches": ("G-9", "F-6", "DHA"),
        "addresses": ("G-9 Islamabad", "F-6 Islamabad", "DHA Lahore"),
        "rating": 4.2,
        "menu": {
            "Burgers": [
                ("Beef Burger", 480),
                ("Cheesy Beef Burger", 520),
                ("Ranch Beef Burger", 580),
                ("Double Decker", 620),
            ],
            "Wraps": [
                ("Grilled Wrap", 300),
                ("Zinger Wrap", 350),
            ],
            "Sandwiches": [
                ("Club Sandwich", 400),
                ("Cheese Sandwich", 370),
            ],
        },
    },
    {
        "name": "Howdy",
        "branches": ("Giga Mall", "Blue Area", "PWD"),
        "addresses": ("Giga Mall Islamabad", "Blue Area Islamabad", "PWD Islamabad"),
        "rating": 4.0,
        "menu": {
            "Burgers": [
                ("Howdy Burger", 550),
                ("Cheese Gun Burger", 580),
                ("Wild West Burger", 700),
                ("Bacon BBQ Burger", 680),
            ],
            "BBQ": [
                ("BBQ Platter", 1200),
                ("BBQ Ribs", 1300),
            ],
            "Steaks": [
                ("Ribeye Steak", 1400),
                ("T-Bone Steak", 1600),
            ],
        },
    },
]


def build_restaurant(data: dict) -> Restaurant:
    """Build a Restaurant record from one literal data table."""
    menu = {
        category: tuple(MenuItem(name=name, price=price) for name, price in items)
        for category, items in data["menu"].items()
    }
    return Restaurant(
        name=data["name"],
        branches=data["branches"],
        addresses=data["addresses"],
        rating=data["rating"],
        menu=menu,
    )


class RestaurantService:
    """Read-only catalog of the supported restaurants.

    The catalog is built once and never mutated afterwards.
    """

    def __init__(self, data: list[dict] | None = None) -> None:
        """Initialize the restaurant service.

        Args:
            data: Restaurant data tables (defaults to the built-in catalog)
        """
        tables = RESTAURANT_DATA if data is None else data
        self._restaurants: tuple[Restaurant, ...] = tuple(
            build_restaurant(table) for table in tables
        )
        logger.info(f"Initialized restaurant catalog: {', '.join(self.names)}")

    @property
    def restaurants(self) -> tuple[Restaurant, ...]:
        """All restaurants in catalog order."""
        return self._restaurants

    @property
    def names(self) -> list[str]:
        return [restaurant.name for restaurant in self._restaurants]

    def find_restaurant(self, restaurant_name: str) -> Restaurant | None:
        """Find a restaurant by exact, case-insensitive name.

        Args:
            restaurant_name: The name of the restaurant to find

        Returns:
            Restaurant object if found, None otherwise
        """
        wanted = restaurant_name.lower()
        for restaurant in self._restaurants:
            if restaurant.name.lower() == wanted:
                return restaurant

        logger.info(f"Restaurant not found: {restaurant_name}")
        return None


# Global shared instance
_restaurant_service: RestaurantService | None = None


def get_restaurant_service() -> RestaurantService:
    """Get the global RestaurantService instance.

    Returns:
        RestaurantService with the built-in catalog
    """
    global _restaurant_service
    if _restaurant_service is None:
        _restaurant_service = RestaurantService()
    return _restaurant_service
