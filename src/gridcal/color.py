# SPDX-License-Identifier: MIT

from gridcal.model.category import CATEGORY_COLORS, Category, normalize_category

# Color constants for calendar chrome
TODAY_STYLE = "bold black on bright_cyan"
OUTSIDE_MONTH_STYLE = "bright_black"
CONFLICT_STYLE = "bold yellow"


def get_category_color(category: str) -> str:
    """Return the hex color for a category, falling back to 'other'."""
    return CATEGORY_COLORS.get(category, CATEGORY_COLORS[Category.OTHER])


def get_contrast_color(background_color: str) -> str:
    """Return black or white, whichever reads better on the background.

    Uses perceived luminance (0.299 R + 0.587 G + 0.114 B) of a '#rrggbb' color.
    """
    hex_value = background_color.lstrip("#")
    red = int(hex_value[0:2], 16)
    green = int(hex_value[2:4], 16)
    blue = int(hex_value[4:6], 16)

    luminance = (0.299 * red + 0.587 * green + 0.114 * blue) / 255

    return "#000000" if luminance > 0.5 else "#ffffff"


def get_category_style(category: str) -> str:
    """Rich style string rendering text on the category's color."""
    background = get_category_color(normalize_category(category))
    return f"{get_contrast_color(background)} on {background}"
