"""Tests for the interactive order flow."""

import pytest
from conftest import ScriptedAsk

from chefbot.handlers import OrderFlow, OrderStage
from chefbot.models import CommandStatus, OrderStatus


@pytest.fixture
def run_order(restaurant_service, activity_log):
    """Run an order flow against scripted answers."""

    def _run(*answers, log=None):
        ask = ScriptedAsk(*answers)
        flow = OrderFlow(restaurant_service, log or activity_log, ask)
        return flow, flow.run(), ask

    return _run


class TestConfirmedOrder:
    """Tests for a completed order."""

    def test_zinger_burger_bill(self, run_order, activity_log):
        """Test tax, total and the logged order block."""
        flow, result, _ask = run_order("Cheezious", "Burgers", "Zinger Burger", "yes")

        assert result.status == CommandStatus.OK
        assert flow.stage == OrderStage.CONFIRMED
        assert result.order.tax == pytest.approx(67.5)
        assert result.order.total == pytest.approx(517.5)
        assert "Item: Zinger Burger - Rs 450.00" in result.message
        assert "Tax (15%): Rs 67.50" in result.message
        assert "Total: Rs 517.50" in result.message
        assert "Order logged successfully." in result.message

        log = activity_log.order_history_path.read_text()
        assert log == (
            "Restaurant: Cheezious\n"
            "Item: Zinger Burger\n"
            "Price: Rs 450.00\n"
            "Tax: Rs 67.50\n"
            "Total: Rs 517.50\n"
            "-----------------------------\n"
        )

    def test_lookups_ignore_case(self, run_order):
        """Test restaurant, category and item names ignore case; 'y' confirms."""
        _flow, result, _ask = run_order("ranchers", "WRAPS", "zinger wrap", "Y")

        assert result.status == CommandStatus.OK
        assert result.order.restaurant_name == "Ranchers"
        assert result.order.item.name == "Zinger Wrap"

    def test_prompts_show_details_and_items(self, run_order):
        """Test each prompt carries the output of the previous step."""
        _flow, _result, ask = run_order("Howdy", "Steaks", "Ribeye Steak", "yes")

        assert "ORDER PROCESS STARTED" in ask.prompts[0]
        assert "Available: Cheezious, Ranchers, Howdy" in ask.prompts[0]
        assert "Howdy (Rating: 4/5)" in ask.prompts[1]
        assert "Which category" in ask.prompts[1]
        assert "Available items in Steaks" in ask.prompts[2]
        assert "   - Ribeye Steak: Rs 1400" in ask.prompts[2]
        assert "ORDER SUMMARY" in ask.prompts[3]
        assert "Confirm order? (yes/no)" in ask.prompts[3]

    def test_log_failure_only_warns(self, run_order, broken_activity_log):
        """Test a failed order log still confirms the order."""
        _flow, result, _ask = run_order(
            "Cheezious", "Burgers", "Zinger Burger", "yes", log=broken_activity_log
        )

        assert result.status == CommandStatus.OK
        assert "Warning: Could not log order to file." in result.message
        assert "Your order will be prepared shortly!" in result.message

    def test_two_orders_append_two_blocks(self, run_order, activity_log):
        """Test each confirmed order appends its own block."""
        run_order("Cheezious", "Burgers", "Zinger Burger", "yes")
        run_order("Ranchers", "Wraps", "Grilled Wrap", "yes")

        log = activity_log.order_history_path.read_text()
        assert log.count("-----------------------------") == 2
        assert log.index("Zinger Burger") < log.index("Grilled Wrap")


class TestCancelledOrder:
    """Tests for declining the confirmation."""

    @pytest.mark.parametrize("answer", ["no", "n", "", "sure"])
    def test_cancel(self, run_order, activity_log, answer):
        """Test anything other than yes/y cancels without logging."""
        flow, result, _ask = run_order("Cheezious", "Burgers", "Zinger Burger", answer)

        assert result.status == CommandStatus.CANCELLED
        assert flow.stage == OrderStage.CANCELLED
        assert result.message == " Order canceled."
        assert result.order.status == OrderStatus.CANCELLED
        assert not activity_log.order_history_path.exists()


class TestAbortedOrder:
    """Tests for lookup failures, which end the flow immediately."""

    def test_unknown_restaurant(self, run_order, activity_log):
        """Test an unknown restaurant stops before asking for a category."""
        flow, result, ask = run_order("KFC")

        assert result.status == CommandStatus.NOT_FOUND
        assert flow.stage == OrderStage.ABORTED
        assert "Restaurant 'KFC' not found." in result.message
        assert "Available restaurants: Cheezious, Ranchers, Howdy" in result.message
        assert len(ask.prompts) == 1
        assert not activity_log.order_history_path.exists()

    def test_unknown_category(self, run_order):
        """Test an unknown category lists the valid ones."""
        _flow, result, ask = run_order("Cheezious", "Desserts")

        assert result.status == CommandStatus.NOT_FOUND
        assert "Category 'Desserts' not found." in result.message
        assert "Available categories: Burgers Pastas Pizzas" in result.message
        assert len(ask.prompts) == 2

    def test_unknown_item(self, run_order):
        """Test an item from another category is not found."""
        _flow, result, ask = run_order("Cheezious", "Burgers", "Fajita Pizza")

        assert result.status == CommandStatus.NOT_FOUND
        assert "Item 'Fajita Pizza' not found in Burgers." in result.message
        assert len(ask.prompts) == 3


class TestOrderStages:
    """Tests for the stage each step hands over to the next."""

    @pytest.mark.parametrize(
        "answers, stage, prompts",
        [
            ((), OrderStage.AWAIT_RESTAURANT, 1),
            (("Cheezious",), OrderStage.AWAIT_CATEGORY, 2),
            (("Cheezious", "Burgers"), OrderStage.AWAIT_ITEM, 3),
            (("Cheezious", "Burgers", "Zinger Burger"), OrderStage.AWAIT_CONFIRMATION, 4),
        ],
    )
    def test_end_of_input_leaves_pending_stage(
        self, restaurant_service, activity_log, answers, stage, prompts
    ):
        """Test input ending mid-flow propagates and leaves the flow at the pending step."""
        ask = ScriptedAsk(*answers)
        flow = OrderFlow(restaurant_service, activity_log, ask)

        with pytest.raises(EOFError):
            flow.run()

        assert flow.stage == stage
        assert flow.result is None
        assert len(ask.prompts) == prompts
        assert not activity_log.order_history_path.exists()

    def test_abort_keeps_earlier_choices(self, run_order):
        """Test an unknown item keeps the restaurant and category already chosen."""
        flow, result, _ask = run_order("Ranchers", "wraps", "Fajita Wrap")

        assert flow.stage == OrderStage.ABORTED
        assert flow.restaurant.name == "Ranchers"
        assert flow.category == "Wraps"
        assert flow.item is None
        assert flow.result is result
