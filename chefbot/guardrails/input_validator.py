"""Input validation applied before a line reaches the dispatcher."""

import logging

logger = logging.getLogger(__name__)

DEFAULT_MAX_INPUT_LENGTH = 1000

EMPTY_INPUT_HINT = " Please enter a command. Type 'help' for assistance."


class InputValidator:
    """Checks raw input lines typed at the main prompt."""

    @staticmethod
    def validate_user_input(
        user_input: str, max_length: int = DEFAULT_MAX_INPUT_LENGTH
    ) -> tuple[bool, str | None]:
        """Validate one input line.

        Args:
            user_input: The line typed by the user
            max_length: Maximum accepted number of characters

        Returns:
            Tuple of (is_valid, error message shown to the user)
        """
        if not user_input or not user_input.strip():
            return False, EMPTY_INPUT_HINT

        if len(user_input) > max_length:
            logger.warning(
                f"Input rejected: too long ({len(user_input)} > {max_length} chars)"
            )
            return (
                False,
                f" Input too long (max {max_length} characters). Please shorten your request.",
            )

        return True, None
