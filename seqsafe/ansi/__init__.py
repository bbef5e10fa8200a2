"""ANSI escape codes for styled terminal text."""

from seqsafe.ansi.codes import (
    CSI,
    FOREGROUND_RESET,
    BACKGROUND_RESET,
    sgr,
    color,
    color_bg,
    reset,
    bold,
    faint,
    italic,
    underline,
    blink,
    reverse_video,
    strike,
    black,
    red,
    green,
    yellow,
    blue,
    magenta,
    cyan,
    white,
    gray,
    bright_red,
    bright_green,
    bright_yellow,
    bright_blue,
    bright_magenta,
    bright_cyan,
    bright_white,
    black_bg,
    red_bg,
    green_bg,
    yellow_bg,
    blue_bg,
    magenta_bg,
    cyan_bg,
    white_bg,
    gray_bg,
    bright_red_bg,
    bright_green_bg,
    bright_yellow_bg,
    bright_blue_bg,
    bright_magenta_bg,
    bright_cyan_bg,
    bright_white_bg,
    cuu,
    cud,
    cuf,
    cub,
    cha,
    cup,
    clear_screen,
    clear_line,
    show_cursor,
    hide_cursor,
)
from seqsafe.ansi.types import Aec, combine

__all__ = [
    "Aec",
    "combine",
    "CSI",
    "FOREGROUND_RESET",
    "BACKGROUND_RESET",
    "sgr",
    "color",
    "color_bg",
    "reset",
    "bold",
    "faint",
    "italic",
    "underline",
    "blink",
    "reverse_video",
    "strike",
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
    "gray",
    "bright_red",
    "bright_green",
    "bright_yellow",
    "bright_blue",
    "bright_magenta",
    "bright_cyan",
    "bright_white",
    "black_bg",
    "red_bg",
    "green_bg",
    "yellow_bg",
    "blue_bg",
    "magenta_bg",
    "cyan_bg",
    "white_bg",
    "gray_bg",
    "bright_red_bg",
    "bright_green_bg",
    "bright_yellow_bg",
    "bright_blue_bg",
    "bright_magenta_bg",
    "bright_cyan_bg",
    "bright_white_bg",
    "cuu",
    "cud",
    "cuf",
    "cub",
    "cha",
    "cup",
    "clear_screen",
    "clear_line",
    "show_cursor",
    "hide_cursor",
]
