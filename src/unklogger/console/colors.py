"""Console – severity color decorators (colorama)."""
from __future__ import annotations

from typing import Callable

from colorama import Fore, Style, just_fix_windows_console

__all__ = ["ColorDecorator", "colorize", "green", "red", "yellow"]

ColorDecorator = Callable[[str], str]

# No-op outside legacy Windows consoles.
just_fix_windows_console()


def colorize(text: str, color: str) -> str:
    """Wrap *text* in the ANSI *color* code and a reset."""
    return f"{color}{text}{Style.RESET_ALL}"


def green(text: str) -> str:
    return colorize(text, Fore.GREEN)


def yellow(text: str) -> str:
    return colorize(text, Fore.YELLOW)


def red(text: str) -> str:
    return colorize(text, Fore.RED)
