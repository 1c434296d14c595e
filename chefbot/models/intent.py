"""Intent classification and command result models."""

from enum import Enum

from pydantic import BaseModel, Field

from chefbot.models.order import BranchMatch, Order, Recommendation


class IntentType(str, Enum):
    """Purpose of one user input line."""

    HELP = "help"
    RECOMMEND = "recommend"
    ORDER = "order"
    BRANCH_FINDER = "branch_finder"
    OPEN_STATUS = "open_status"
    SHOW_RESTAURANT = "show_restaurant"
    SHOW_BY_FIELD = "show_by_field"
    SHOW_ALL = "show_all"
    TELL_ME_ABOUT_UNCLEAR = "tell_me_about_unclear"
    UNRECOGNIZED = "unrecognized"


class Intent(BaseModel):
    """Classified input line with any extracted parameters."""

    type: IntentType = Field(..., description="Classified intent")
    restaurant_names: list[str] = Field(
        default_factory=list, description="Restaurant names mentioned, lowercase"
    )
    field: str | None = Field(None, description="Restaurant field to list")
    keyword: str | None = Field(None, description="Recommendation keyword filter")


class CommandStatus(str, Enum):
    """How a handler finished."""

    OK = "ok"
    NOT_FOUND = "not_found"
    CANCELLED = "cancelled"
    CLARIFY = "clarify"
    UNRECOGNIZED = "unrecognized"


class CommandResult(BaseModel):
    """Rendered outcome of one handler invocation."""

    status: CommandStatus = Field(..., description="Handler outcome")
    message: str = Field(..., description="Text to show the user")
    order: Order | None = Field(None, description="Order placed, if any")
    recommendations: list[Recommendation] = Field(default_factory=list)
    branches: list[BranchMatch] = Field(default_factory=list)
