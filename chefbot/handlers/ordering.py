"""Interactive single-item order flow."""

import logging
from collections.abc import Callable
from enum import Enum

from chefbot.handlers.info import render_details
from chefbot.models import (
    CommandResult,
    CommandStatus,
    MenuItem,
    Order,
    OrderStatus,
    Restaurant,
    format_amount,
)
from chefbot.services import ActivityLog, RestaurantService

logger = logging.getLogger(__name__)

CONFIRM_ANSWERS = ("yes", "y")


class OrderStage(str, Enum):
    """Steps of the order flow. Any failed lookup ends the flow immediately."""

    AWAIT_RESTAURANT = "await_restaurant"
    AWAIT_CATEGORY = "await_category"
    AWAIT_ITEM = "await_item"
    AWAIT_CONFIRMATION = "await_confirmation"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    ABORTED = "aborted"


def build_order(restaurant: Restaurant, item: MenuItem) -> Order:
    return Order(restaurant_name=restaurant.name, item=item)


def render_bill(order: Order) -> list[str]:
    return [
        "",
        " ORDER CONFIRMED!",
        "-" * 25,
        " BILL SUMMARY:",
        f"Item: {order.item.name} - Rs {order.price:.2f}",
        f"Tax (15%): Rs {order.tax:.2f}",
        f"Total: Rs {order.total:.2f}",
        "-" * 25,
    ]


class OrderFlow:
    """Walks the user through restaurant, category, item and confirmation.

    Each step asks one question and returns the next stage; the flow stops
    at the first terminal stage. There is no retry inside one flow: the user
    re-issues the order command after a failed lookup.
    """

    def __init__(
        self,
        restaurant_service: RestaurantService,
        activity_log: ActivityLog,
        ask: Callable[[str], str],
    ) -> None:
        """Initialize the order flow.

        Args:
            restaurant_service: Catalog to order from
            activity_log: Log receiving confirmed orders
            ask: Shows a prompt and returns the user's answer
        """
        self.restaurant_service = restaurant_service
        self.activity_log = activity_log
        self.ask = ask
        self.stage = OrderStage.AWAIT_RESTAURANT
        self.restaurant: Restaurant | None = None
        self.category: str | None = None
        self.item: MenuItem | None = None
        self.result: CommandResult | None = None

    def run(self) -> CommandResult:
        """Run the order flow to completion.

        Returns:
            CommandResult with the bill, a cancellation or a lookup error
        """
        steps = {
            OrderStage.AWAIT_RESTAURANT: self._choose_restaurant,
            OrderStage.AWAIT_CATEGORY: self._choose_category,
            OrderStage.AWAIT_ITEM: self._choose_item,
            OrderStage.AWAIT_CONFIRMATION: self._confirm,
        }

        self.stage = OrderStage.AWAIT_RESTAURANT
        while self.stage in steps:
            self.stage = steps[self.stage]()

        logger.info(f"Order flow finished: {self.stage.value}")
        return self.result

    def _abort(self, output: list[str]) -> OrderStage:
        logger.info(f"Order aborted at {self.stage.value}")
        self.result = CommandResult(
            status=CommandStatus.NOT_FOUND, message="\n".join(output)
        )
        return OrderStage.ABORTED

    def _choose_restaurant(self) -> OrderStage:
        available = ", ".join(self.restaurant_service.names)
        prompt = [
            "",
            " ORDER PROCESS STARTED",
            "-" * 30,
            "Which restaurant would you like to order from?",
            f"Available: {available}",
            "Enter restaurant name: ",
        ]
        restaurant_name = self.ask("\n".join(prompt))
        self.restaurant = self.restaurant_service.find_restaurant(restaurant_name)
        if self.restaurant is None:
            return self._abort(
                [
                    f" Restaurant '{restaurant_name}' not found.",
                    f"Available restaurants: {available}",
                ]
            )
        return OrderStage.AWAIT_CATEGORY

    def _choose_category(self) -> OrderStage:
        restaurant = self.restaurant
        category_name = self.ask(
            render_details(restaurant)
            + "\n\nWhich category would you like to order from? "
        )
        self.category = restaurant.find_category(category_name)
        if self.category is None:
            return self._abort(
                [
                    f" Category '{category_name}' not found.",
                    f"Available categories: {' '.join(restaurant.categories)}",
                ]
            )
        return OrderStage.AWAIT_ITEM

    def _choose_item(self) -> OrderStage:
        category = self.category
        prompt = ["", f" Available items in {category}:"]
        for menu_item in self.restaurant.items(category):
            prompt.append(f"   - {menu_item.name}: Rs {format_amount(menu_item.price)}")
        prompt.extend(["", "Enter item name: "])
        item_name = self.ask("\n".join(prompt))
        self.item = self.restaurant.find_item(category, item_name)
        if self.item is None:
            return self._abort([f" Item '{item_name}' not found in {category}."])
        return OrderStage.AWAIT_CONFIRMATION

    def _confirm(self) -> OrderStage:
        restaurant, item = self.restaurant, self.item
        prompt = [
            "",
            " ORDER SUMMARY:",
            f"Restaurant: {restaurant.name}",
            f"Item: {item.name}",
            f"Price: Rs {format_amount(item.price)}",
            "",
            "Confirm order? (yes/no): ",
        ]
        answer = self.ask("\n".join(prompt))

        if answer.strip().lower() not in CONFIRM_ANSWERS:
            logger.info(f"Order cancelled: {item.name} from {restaurant.name}")
            self.result = CommandResult(
                status=CommandStatus.CANCELLED,
                message=" Order canceled.",
                order=Order(
                    restaurant_name=restaurant.name,
                    item=item,
                    status=OrderStatus.CANCELLED,
                ),
            )
            return OrderStage.CANCELLED

        order = build_order(restaurant, item)
        output = render_bill(order)
        if self.activity_log.log_order(order):
            output.append(" Order logged successfully.")
        else:
            output.append(" Warning: Could not log order to file.")
        output.append(" Your order will be prepared shortly!")

        self.result = CommandResult(
            status=CommandStatus.OK, message="\n".join(output), order=order
        )
        return OrderStage.CONFIRMED
