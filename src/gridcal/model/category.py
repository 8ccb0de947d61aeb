# SPDX-License-Identifier: MIT

from typing import Any


class Category:
    WORK = "work"
    PERSONAL = "personal"
    HEALTH = "health"
    SOCIAL = "social"
    TRAVEL = "travel"
    MEETING = "meeting"
    DEADLINE = "deadline"
    BIRTHDAY = "birthday"
    HOLIDAY = "holiday"
    OTHER = "other"


CATEGORY_COLORS: dict[str, str] = {
    Category.WORK: "#ef4444",
    Category.PERSONAL: "#3b82f6",
    Category.HEALTH: "#10b981",
    Category.SOCIAL: "#f59e0b",
    Category.TRAVEL: "#8b5cf6",
    Category.OTHER: "#6b7280",
    Category.MEETING: "#06b6d4",
    Category.DEADLINE: "#dc2626",
    Category.BIRTHDAY: "#ec4899",
    Category.HOLIDAY: "#84cc16",
}

CATEGORIES = list(CATEGORY_COLORS.keys())


def normalize_category(category: Any) -> str:
    if isinstance(category, str) and category in CATEGORY_COLORS:
        return category
    return Category.OTHER
