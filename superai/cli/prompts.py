"""Interactive prompts for CLI using questionary."""

import questionary
from questionary import Style

# Custom style for questionary prompts
CUSTOM_STYLE = Style(
    [
        ("qmark", "fg:cyan bold"),
        ("question", "bold"),
        ("answer", "fg:green bold"),
        ("instruction", "fg:gray"),
        ("text", ""),
    ]
)


def confirm_action(question: str, default: bool) -> bool:
    """Ask a yes/no question.

    Args:
        question: Question to show.
        default: Answer used when the user just presses enter.

    Returns:
        True if confirmed. Ctrl+C counts as "no".
    """
    answer = questionary.confirm(
        question,
        default=default,
        style=CUSTOM_STYLE,
    ).ask()

    return bool(answer)
