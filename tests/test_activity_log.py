"""Tests for the append-only activity logs."""

from chefbot.config import Config
from chefbot.models import MenuItem, Order
from chefbot.services import ActivityLog


class TestActivityLog:
    """Tests for the ActivityLog writer."""

    def test_chat_lines_append(self, activity_log):
        """Test each input becomes one User: line."""
        activity_log.log_chat("help")
        activity_log.log_chat("order")

        assert activity_log.chat_log_path.read_text() == "User: help\nUser: order\n"

    def test_recommendation_line(self, activity_log):
        """Test the recommendation record format."""
        assert activity_log.log_recommendation("", 500.0) is True

        assert activity_log.recommendations_log_path.read_text() == (
            "Keyword: , MaxPrice: 500\n"
        )

    def test_order_block(self, activity_log):
        """Test the order block keeps earlier records intact."""
        activity_log.order_history_path.write_text("previous record\n")
        order = Order(
            restaurant_name="Ranchers",
            item=MenuItem(name="Club Sandwich", price=400),
        )

        assert activity_log.log_order(order) is True

        lines = activity_log.order_history_path.read_text().splitlines()
        assert lines == [
            "previous record",
            "Restaurant: Ranchers",
            "Item: Club Sandwich",
            "Price: Rs 400.00",
            "Tax: Rs 60.00",
            "Total: Rs 460.00",
            "-----------------------------",
        ]

    def test_write_failure_returns_false(self, broken_activity_log):
        """Test unwritable files are reported, not raised."""
        order = Order(
            restaurant_name="Howdy",
            item=MenuItem(name="BBQ Ribs", price=1300),
        )

        assert broken_activity_log.log_chat("hello") is False
        assert broken_activity_log.log_order(order) is False
        assert broken_activity_log.log_recommendation("wrap", 500) is False

    def test_from_config(self, tmp_path):
        """Test paths are taken from the configuration."""
        cfg = Config(
            chat_log_path=tmp_path / "chat.txt",
            order_history_path=tmp_path / "orders.txt",
            recommendations_log_path=tmp_path / "recs.txt",
        )

        log = ActivityLog.from_config(cfg)

        assert log.chat_log_path == tmp_path / "chat.txt"
        assert log.order_history_path == tmp_path / "orders.txt"
        assert log.recommendations_log_path == tmp_path / "recs.txt"
