"""Static help texts."""

from chefbot.models import CommandResult, CommandStatus

HELP_TEXT = "\n".join(
    [
        "",
        "=" * 50,
        " CHEFBOT COMMAND GUIDE",
        "=" * 50,
        " INFORMATION COMMANDS:",
        "   • 'tell me about restaurants' - Show all restaurant info",
        "   • 'tell me about [restaurant name]' - Show specific restaurant",
        "     Examples: 'tell me about cheezious'",
        "               'tell me about ranchers'",
        "               'tell me about howdy'",
        "   • 'tell me about names' - Show restaurant names",
        "   • 'tell me about ratings' - Show restaurant ratings",
        "   • 'tell me about menu' - Show all menus",
        "   • 'tell me about addresses' - Show all addresses",
        "",
        " ORDERING COMMANDS:",
        "   • 'order' - Start the ordering process",
        "   • 'place order' - Alternative ordering command",
        "",
        " RECOMMENDATION COMMANDS:",
        "   • 'recommend' - Show all items under Rs 500",
        "   • 'recommend burger' - Show burger recommendations",
        "   • 'recommend pizza' - Show pizza recommendations",
        "   • 'recommend pasta' - Show pasta recommendations",
        "   • 'recommend wrap' - Show wrap recommendations",
        "   • 'recommend sandwich' - Show sandwich recommendations",
        "",
        " LOCATION COMMANDS:",
        "   • 'nearest branch' - Find branches in your city",
        "   • 'find branches' - Alternative branch finder",
        "",
        " STATUS COMMANDS:",
        "   • '[restaurant name] open now' - Check if restaurant is open",
        "     Examples: 'cheezious open now'",
        "               'ranchers open status'",
        "               'howdy open now'",
        "",
        " HELP & EXIT:",
        "   • 'help' - Show this command guide",
        "   • 'commands' - Show available commands",
        "   • 'exit' - Quit ChefBot",
        "=" * 50,
        " TIP: Commands are not case-sensitive!",
        "=" * 50,
    ]
)

QUICK_COMMANDS_TEXT = "\n".join(
    [
        "",
        " Quick Commands:",
        "• help - Show full command guide",
        "• tell me about restaurants - Show all info",
        "• order - Place an order",
        "• recommend - Get recommendations under Rs 500",
        "• nearest branch - Find branches near you",
        "• [restaurant] open now - Check opening status",
        "• exit - Quit ChefBot",
    ]
)


def show_help() -> CommandResult:
    return CommandResult(status=CommandStatus.OK, message=HELP_TEXT)


def tell_me_about_unclear() -> CommandResult:
    message = " I need more specific information. Try:\n" + QUICK_COMMANDS_TEXT
    return CommandResult(status=CommandStatus.CLARIFY, message=message)


def not_understood(user_input: str) -> CommandResult:
    output = [
        f" Sorry, I don't understand '{user_input}'.",
        "Type 'help' to see all available commands.",
        QUICK_COMMANDS_TEXT,
    ]
    return CommandResult(status=CommandStatus.UNRECOGNIZED, message="\n".join(output))
