"""
ANSI escape sequences: Select Graphic Rendition styles and colors, 8-bit and
24-bit colors, cursor movement and screen clearing.

    >>> red("error")
    '\\x1b[31merror\\x1b[39m'
"""
from seqsafe.ansi.types import Aec

CSI = "\x1b["
"""Control Sequence Introducer."""

FOREGROUND_RESET = "39"
BACKGROUND_RESET = "49"


def sgr(code: str) -> str:
    """Select Graphic Rendition sequence for ``code`` (e.g. ``"1"`` or ``"38;5;208"``)."""
    return f"{CSI}{code}m"


def _checked_channel(name: str, value: int) -> int:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} ({value}) must be within [0, 255]")
    return value


def _color(prefix: str, reset: str, *channels: int) -> Aec:
    if len(channels) not in (1, 3):
        raise TypeError(f"Expected 1 or 3 color values, got {len(channels)}")
    names = ("color",) if len(channels) == 1 else ("r", "g", "b")
    values = [str(_checked_channel(n, c)) for n, c in zip(names, channels)]
    mode = "5" if len(channels) == 1 else "2"
    return Aec(sgr(";".join([prefix, mode, *values])), sgr(reset))


def color(*channels: int) -> Aec:
    """Foreground color: ``color(n)`` for the 8-bit palette, ``color(r, g, b)`` for 24-bit."""
    return _color("38", FOREGROUND_RESET, *channels)


def color_bg(*channels: int) -> Aec:
    """Background color: ``color_bg(n)`` or ``color_bg(r, g, b)``."""
    return _color("48", BACKGROUND_RESET, *channels)


def _style(code: int, reset: int) -> Aec:
    return Aec(sgr(str(code)), sgr(str(reset)))


def _fg(code: int) -> Aec:
    return Aec(sgr(str(code)), sgr(FOREGROUND_RESET))


def _bg(code: int) -> Aec:
    return Aec(sgr(str(code)), sgr(BACKGROUND_RESET))


reset = _style(0, 0)
bold = _style(1, 22)
faint = _style(2, 22)
italic = _style(3, 23)
underline = _style(4, 24)
blink = _style(5, 25)
reverse_video = _style(7, 27)
strike = _style(9, 29)

black = _fg(30)
red = _fg(31)
green = _fg(32)
yellow = _fg(33)
blue = _fg(34)
magenta = _fg(35)
cyan = _fg(36)
white = _fg(37)
gray = _fg(90)
bright_red = _fg(91)
bright_green = _fg(92)
bright_yellow = _fg(93)
bright_blue = _fg(94)
bright_magenta = _fg(95)
bright_cyan = _fg(96)
bright_white = _fg(97)

black_bg = _bg(40)
red_bg = _bg(41)
green_bg = _bg(42)
yellow_bg = _bg(43)
blue_bg = _bg(44)
magenta_bg = _bg(45)
cyan_bg = _bg(46)
white_bg = _bg(47)
gray_bg = _bg(100)
bright_red_bg = _bg(101)
bright_green_bg = _bg(102)
bright_yellow_bg = _bg(103)
bright_blue_bg = _bg(104)
bright_magenta_bg = _bg(105)
bright_cyan_bg = _bg(106)
bright_white_bg = _bg(107)


def cuu(n: int = 1) -> str:
    """Cursor up ``n`` cells."""
    return f"{CSI}{n}A"


def cud(n: int = 1) -> str:
    """Cursor down ``n`` cells."""
    return f"{CSI}{n}B"


def cuf(n: int = 1) -> str:
    """Cursor forward (right) ``n`` cells."""
    return f"{CSI}{n}C"


def cub(n: int = 1) -> str:
    """Cursor back (left) ``n`` cells."""
    return f"{CSI}{n}D"


def cha(x: int) -> str:
    """Cursor to column ``x``."""
    return f"{CSI}{x}G"


def cup(x: int, y: int) -> str:
    """Cursor to column ``x`` of row ``y`` (the sequence lists the row first)."""
    return f"{CSI}{y};{x}H"


# Also drops the scrollback buffer
clear_screen = Aec(f"{CSI}2J{CSI}3J{cup(1, 1)}")
clear_line = Aec(f"{CSI}2K{cha(1)}")
show_cursor = Aec(f"{CSI}?25h")
hide_cursor = Aec(f"{CSI}?25l")
