"""ANSI colors for the status column and error messages.

Installed packages are shown green, the rest dimmed; errors are red.
Colors are off unless stdout is a terminal and NO_COLOR is unset.
"""

import os
import sys

_COLORS = {
    'reset': '\033[0m',
    'red': '\033[91m',
    'green': '\033[92m',
    'dim': '\033[2m',
}

_colors_enabled = True


def init(nocolor: bool = False, stream=None):
    """Decide once whether output gets colored.

    Args:
        nocolor: --nocolor was given
        stream: Output stream to probe (default: sys.stdout)
    """
    global _colors_enabled

    stream = stream if stream is not None else sys.stdout
    # https://no-color.org/
    _colors_enabled = not (nocolor or os.environ.get('NO_COLOR') or not stream.isatty())


def enabled() -> bool:
    return _colors_enabled


def colorize(text: str, color: str) -> str:
    """Return text in the named color, or unchanged when colors are off."""
    if not _colors_enabled:
        return text
    return f"{_COLORS[color]}{text}{_COLORS['reset']}"


def error(text: str) -> str:
    return colorize(text, 'red')


def status(text: str) -> str:
    """Color an installed-status cell: green if installed, dim otherwise."""
    return colorize(text, 'green' if text == "installed" else 'dim')
