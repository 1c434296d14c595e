"""Free-text intent dispatcher.

Classifies one raw input line by running an ordered list of substring rules;
the first rule that matches wins. Keywords overlap between intents (an input
can mention both "order" and "branch"), so the rule order decides the outcome
and must not be rearranged.
"""

import logging
from collections.abc import Callable
from typing import NamedTuple

from chefbot.models import Intent, IntentType

logger = logging.getLogger(__name__)

HELP_PHRASES = ("help", "commands", "what can you do")
RECOMMEND_KEYWORDS = ("burger", "pizza", "pasta", "wrap", "sandwich")
BRANCH_PHRASES = ("nearest", "branch", "find branches")
OPEN_STATUS_PHRASES = ("open now", "open status")
# Checked in this order; only the first one found is shown
FIELD_KEYWORDS = ("name", "address", "menu", "branches", "rating", "prices")


class DispatchRule(NamedTuple):
    """One classification rule: a predicate and the intent it builds."""

    name: str
    matches: Callable[[str], bool]
    build: Callable[[str], Intent]


def _first_found(text: str, candidates) -> str | None:
    for candidate in candidates:
        if candidate in text:
            return candidate
    return None


class IntentDispatcher:
    """Maps raw user input to exactly one Intent."""

    def __init__(self, restaurant_names: list[str]) -> None:
        """Initialize the dispatcher.

        Args:
            restaurant_names: Catalog restaurant names, in catalog order
        """
        self.restaurant_names = [name.lower() for name in restaurant_names]
        self.rules: list[DispatchRule] = [
            DispatchRule("help", self._is_help, self._build(IntentType.HELP)),
            DispatchRule("recommend", self._is_recommend, self._build_recommend),
            DispatchRule("order", lambda text: "order" in text, self._build(IntentType.ORDER)),
            DispatchRule(
                "branch-finder",
                lambda text: _first_found(text, BRANCH_PHRASES) is not None,
                self._build(IntentType.BRANCH_FINDER),
            ),
            DispatchRule(
                "open-status",
                lambda text: _first_found(text, OPEN_STATUS_PHRASES) is not None,
                self._build_open_status,
            ),
            DispatchRule(
                "tell-me-about",
                lambda text: "tell me about" in text,
                self._build_tell_me_about,
            ),
        ]

    @staticmethod
    def _build(intent_type: IntentType) -> Callable[[str], Intent]:
        return lambda _text: Intent(type=intent_type)

    @staticmethod
    def _is_help(text: str) -> bool:
        return text in HELP_PHRASES

    @staticmethod
    def _is_recommend(text: str) -> bool:
        return "recommend" in text or ("tell me about" in text and "under" in text)

    @staticmethod
    def _build_recommend(text: str) -> Intent:
        return Intent(
            type=IntentType.RECOMMEND,
            keyword=_first_found(text, RECOMMEND_KEYWORDS),
        )

    def _build_open_status(self, text: str) -> Intent:
        target = _first_found(text, self.restaurant_names)
        return Intent(
            type=IntentType.OPEN_STATUS,
            restaurant_names=[target] if target else [],
        )

    def _build_tell_me_about(self, text: str) -> Intent:
        mentioned = [name for name in self.restaurant_names if name in text]
        if mentioned:
            return Intent(type=IntentType.SHOW_RESTAURANT, restaurant_names=mentioned)

        field = _first_found(text, FIELD_KEYWORDS)
        if field:
            return Intent(type=IntentType.SHOW_BY_FIELD, field=field)

        if "restaurants" in text:
            return Intent(type=IntentType.SHOW_ALL)

        return Intent(type=IntentType.TELL_ME_ABOUT_UNCLEAR)

    def classify(self, user_input: str) -> Intent:
        """Classify one input line.

        Args:
            user_input: Raw input line

        Returns:
            The intent of the first matching rule, or UNRECOGNIZED
        """
        text = user_input.lower()
        for rule in self.rules:
            if rule.matches(text):
                intent = rule.build(text)
                logger.debug(f"Input matched rule '{rule.name}': {intent.type.value}")
                return intent

        logger.debug("Input matched no rule")
        return Intent(type=IntentType.UNRECOGNIZED)
