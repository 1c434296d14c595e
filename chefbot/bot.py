"""ChefBot: routes classified user input to the matching handler."""

import logging
from collections.abc import Callable
from datetime import datetime

from chefbot import handlers
from chefbot.dispatcher import IntentDispatcher
from chefbot.models import CommandResult, Intent, IntentType
from chefbot.services import ActivityLog, RestaurantService

logger = logging.getLogger(__name__)


class ChefBot:
    """Food ordering assistant over the built-in restaurant catalog.

    Attributes:
        restaurant_service: Read-only restaurant catalog
        activity_log: Append-only chat, order and recommendation logs
        dispatcher: Classifies input lines into intents
    """

    def __init__(
        self,
        restaurant_service: RestaurantService,
        activity_log: ActivityLog,
        ask: Callable[[str], str] | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the bot.

        Args:
            restaurant_service: Restaurant catalog
            activity_log: Log writer
            ask: Shows a prompt and returns the user's answer
            clock: Returns the current local time
        """
        self.restaurant_service = restaurant_service
        self.activity_log = activity_log
        self.ask = ask or input
        self.clock = clock
        self.dispatcher = IntentDispatcher(restaurant_service.names)

    def greeting(self) -> str:
        """Welcome banner shown when the session starts."""
        return "\n".join(
            [
                "",
                "=" * 60,
                " Welcome to ChefBot - Your Food Ordering Assistant!",
                "=" * 60,
                "Type 'help' to see all available commands or 'exit' to quit.",
                "=" * 60,
            ]
        )

    def handle_input(self, user_input: str) -> CommandResult:
        """Log, classify and answer one input line.

        Args:
            user_input: The user's raw input

        Returns:
            CommandResult produced by the matching handler
        """
        self.activity_log.log_chat(user_input)

        intent = self.dispatcher.classify(user_input)
        logger.info(f"Classified input as {intent.type.value}")

        return self._route(intent, user_input)

    def _route(self, intent: Intent, user_input: str) -> CommandResult:
        restaurants = self.restaurant_service.restaurants

        if intent.type == IntentType.HELP:
            return handlers.show_help()

        if intent.type == IntentType.RECOMMEND:
            return handlers.recommend(
                restaurants, self.activity_log, self.ask, keyword=intent.keyword
            )

        if intent.type == IntentType.ORDER:
            flow = handlers.OrderFlow(self.restaurant_service, self.activity_log, self.ask)
            return flow.run()

        if intent.type == IntentType.BRANCH_FINDER:
            return handlers.nearest_branch(restaurants, self.ask)

        if intent.type == IntentType.OPEN_STATUS:
            target = intent.restaurant_names[0] if intent.restaurant_names else None
            return handlers.check_open_status(
                self.restaurant_service, target, clock=self.clock
            )

        if intent.type == IntentType.SHOW_RESTAURANT:
            # Every mentioned restaurant is shown, in catalog order
            mentioned = [r for r in restaurants if r.name.lower() in intent.restaurant_names]
            return handlers.show_restaurants(mentioned)

        if intent.type == IntentType.SHOW_BY_FIELD:
            return handlers.show_by_field(restaurants, intent.field or "")

        if intent.type == IntentType.SHOW_ALL:
            return handlers.show_all(restaurants)

        if intent.type == IntentType.TELL_ME_ABOUT_UNCLEAR:
            return handlers.tell_me_about_unclear()

        return handlers.not_understood(user_input)
