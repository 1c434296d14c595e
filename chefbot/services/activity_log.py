"""Append-only text logs for chat input, orders and recommendations."""

import logging
from pathlib import Path

from chefbot.config import Config, get_config
from chefbot.models import Order, format_amount

logger = logging.getLogger(__name__)

ORDER_SEPARATOR = "-" * 29


class ActivityLog:
    """Writes human-readable records to the chat, order and recommendation logs.

    Every record is written by a single open/write/close of its file, so a
    failed write never leaves half of one record inside another.
    """

    def __init__(
        self,
        chat_log_path: Path,
        order_history_path: Path,
        recommendations_log_path: Path,
    ) -> None:
        """Initialize the activity log.

        Args:
            chat_log_path: File receiving one line per user input
            order_history_path: File receiving one block per confirmed order
            recommendations_log_path: File receiving one line per recommendation query
        """
        self.chat_log_path = Path(chat_log_path)
        self.order_history_path = Path(order_history_path)
        self.recommendations_log_path = Path(recommendations_log_path)

    @classmethod
    def from_config(cls, cfg: Config | None = None) -> "ActivityLog":
        if cfg is None:
            cfg = get_config()
        return cls(
            chat_log_path=cfg.chat_log_path,
            order_history_path=cfg.order_history_path,
            recommendations_log_path=cfg.recommendations_log_path,
        )

    def _append(self, path: Path, record: str) -> bool:
        """Append one record to a log file.

        Args:
            path: Log file to append to
            record: Complete record text, including trailing newline

        Returns:
            True if the record was written, False otherwise
        """
        try:
            with path.open("a", encoding="utf-8") as f:
                f.write(record)
        except OSError as e:
            logger.info(f"Could not write to {path}: {e}")
            return False
        return True

    def log_chat(self, user_input: str) -> bool:
        return self._append(self.chat_log_path, f"User: {user_input}\n")

    def log_order(self, order: Order) -> bool:
        """Append a confirmed order block to the order history.

        Args:
            order: The confirmed order

        Returns:
            True if the block was written, False otherwise
        """
        record = "\n".join(
            [
                f"Restaurant: {order.restaurant_name}",
                f"Item: {order.item.name}",
                f"Price: Rs {order.price:.2f}",
                f"Tax: Rs {order.tax:.2f}",
                f"Total: Rs {order.total:.2f}",
                ORDER_SEPARATOR,
            ]
        )
        written = self._append(self.order_history_path, record + "\n")
        if written:
            logger.info(f"Logged order: {order.item.name} from {order.restaurant_name}")
        else:
            logger.warning(f"Order history not updated: {self.order_history_path}")
        return written

    def log_recommendation(self, keyword: str, max_price: float) -> bool:
        return self._append(
            self.recommendations_log_path,
            f"Keyword: {keyword}, MaxPrice: {format_amount(max_price)}\n",
        )
