# SPDX-License-Identifier: MIT

from gridcal.model.category import CATEGORIES
from gridcal.model.event import RECURRENCE_PATTERNS


def complete_category(incomplete: str) -> list[str]:
    return [category for category in CATEGORIES if category.startswith(incomplete)]


def complete_recurrence_pattern(incomplete: str) -> list[str]:
    return [
        pattern for pattern in RECURRENCE_PATTERNS if pattern.startswith(incomplete)
    ]
