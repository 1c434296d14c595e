"""Command-line interface for ChefBot."""

import logging
import sys
from collections.abc import Callable

from chefbot.bot import ChefBot
from chefbot.config import Config, get_config, setup_logging
from chefbot.guardrails import InputValidator
from chefbot.services import ActivityLog, get_restaurant_service

logger = logging.getLogger(__name__)

EXIT_WORDS = ("exit", "quit", "bye", "goodbye")
MAIN_PROMPT = "\n ChefBot: What can I help you with today? "


class ChefBotCLI:
    """Interactive read-a-line-then-answer loop around ChefBot."""

    def __init__(
        self,
        bot: ChefBot,
        config: Config | None = None,
        ask: Callable[[str], str] | None = None,
    ) -> None:
        """Initialize the CLI.

        Args:
            bot: The bot answering each input line
            config: Application configuration
            ask: Shows a prompt and returns the user's answer
        """
        self.bot = bot
        self.config = config or get_config()
        self.ask = ask or input

    def _farewell(self) -> None:
        print("\n" + "=" * 40)
        print(" Thank you for using ChefBot!")
        print(" Happy eating and see you next time!")
        print("=" * 40)

    def run(self) -> None:
        """Run the CLI until the user exits or input ends."""
        print(self.bot.greeting())

        while True:
            try:
                user_input = self.ask(MAIN_PROMPT).strip()

                if user_input.lower() in EXIT_WORDS:
                    self._farewell()
                    break

                is_valid, error = InputValidator.validate_user_input(
                    user_input, max_length=self.config.max_input_length
                )
                if not is_valid:
                    print(error)
                    continue

                # Handlers prompt again for restaurant, item, city or keyword
                result = self.bot.handle_input(user_input)
                print(result.message)
            except (EOFError, KeyboardInterrupt):
                print()
                self._farewell()
                break


def main() -> int:
    """Main entry point for the CLI.

    Returns:
        Process exit status: 0 on a normal exit, 1 after an unexpected error
    """
    try:
        config = get_config()
        setup_logging(config)

        bot = ChefBot(
            restaurant_service=get_restaurant_service(),
            activity_log=ActivityLog.from_config(config),
        )
        ChefBotCLI(bot, config).run()
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        print(f" An error occurred: {e}")
        print("Please restart the program.")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
