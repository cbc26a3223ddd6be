from typing import Optional

from rich.console import Console
from rich.theme import Theme

# Custom theme for consistent styling
custom_theme = Theme(
    {
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "bold red",
        "highlight": "magenta",
    }
)

console = Console(theme=custom_theme)

BANNER_MIN_WIDTH = 60
BANNER_MAX_WIDTH = 100
BANNER_PADDING = 4


def print_literal(text: str, target: Optional[Console] = None) -> None:
    """
    Write text followed by a newline exactly as given.

    Goes straight to the console's file: rich rendering would interpret
    markup, strip control characters such as ``\\r`` and expand tabs.
    """
    out = (target or console).file
    out.write(f"{text}\n")
    out.flush()


def print_banner(title: str, target: Optional[Console] = None) -> None:
    """
    Print a three-line banner with the title centered between two rules.

    The banner is ``len(title)`` plus padding wide, clamped to
    ``[BANNER_MIN_WIDTH, BANNER_MAX_WIDTH]``.

    Args:
        title (str): Text shown in the middle line.
        target (Optional[Console]): Console to print to. Defaults to the shared console.
    """
    raw_width = len(title) + BANNER_PADDING * 2
    total_width = min(max(raw_width, BANNER_MIN_WIDTH), BANNER_MAX_WIDTH)

    banner_line = "=" * total_width
    title_padding = max((total_width - len(title)) // 2, 0)
    trailing = max(total_width - title_padding - len(title), 0)

    print_literal(banner_line, target)
    print_literal(" " * title_padding + title + " " * trailing, target)
    print_literal(banner_line, target)
