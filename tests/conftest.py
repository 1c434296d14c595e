"""Shared fixtures for ChefBot tests."""

from datetime import datetime

import pytest

from chefbot.services import ActivityLog, RestaurantService


class ScriptedAsk:
    """Stands in for input(): replays answers and records the prompts shown."""

    def __init__(self, *answers: str) -> None:
        self.answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def restaurant_service():
    """Create a restaurant service with the built-in catalog."""
    return RestaurantService()


@pytest.fixture
def activity_log(tmp_path):
    """Create an activity log writing into a temporary directory."""
    return ActivityLog(
        chat_log_path=tmp_path / "chat_log.txt",
        order_history_path=tmp_path / "order_history.txt",
        recommendations_log_path=tmp_path / "recommendations.txt",
    )


@pytest.fixture
def broken_activity_log(tmp_path):
    """Create an activity log whose files cannot be opened."""
    missing = tmp_path / "missing"
    return ActivityLog(
        chat_log_path=missing / "chat_log.txt",
        order_history_path=missing / "order_history.txt",
        recommendations_log_path=missing / "recommendations.txt",
    )


def clock_at(hour: int):
    """Build a clock that always reports the given hour."""
    return lambda: datetime(2024, 12, 1, hour, 30)
