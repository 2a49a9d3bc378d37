from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from report_registry.protocols import TextLocalizer

CATEGORY_TEXT_PREFIX = "Report.Category."


def category_text_key(key: str) -> str:
    """Localization key for a category, e.g. ``Sales/Detail`` → ``Report.Category.Sales.Detail``."""
    return CATEGORY_TEXT_PREFIX + key.replace("/", ".")


def get_report_category_title(key: str | None, localizer: TextLocalizer | None) -> str:
    """Localized category title, falling back to the last segment of the key."""
    key = key or ""
    title = localizer.try_get(category_text_key(key)) if localizer is not None else None
    if title is not None:
        return title

    idx = key.rfind("/")
    if 0 <= idx < len(key) - 1:
        return key[idx + 1 :]
    return key
