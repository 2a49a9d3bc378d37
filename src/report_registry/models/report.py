from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

from report_registry.categories import get_report_category_title
from report_registry.errors import ErrorCode, ReportRegistryError
from report_registry.metadata import get_report_category, get_report_key, get_report_metadata

if TYPE_CHECKING:
    from report_registry.protocols import TextLocalizer


class Category(BaseModel):
    """Report category with its resolved display title."""

    model_config = ConfigDict(frozen=True)

    key: str  # "/"-separated path, "" when uncategorized
    title: str


class Report(BaseModel):
    """Description of a single report class."""

    model_config = ConfigDict(frozen=True)

    type: type[Any]
    key: str
    title: str | None = None
    category: Category
    permission: str | None = None  # None means unrestricted


def build_report(cls: type | None, localizer: TextLocalizer | None) -> Report:
    """Derive a ``Report`` from the markers on ``cls``."""
    if cls is None:
        raise ReportRegistryError(ErrorCode.INVALID_ARGUMENT, "type must not be None")

    meta = get_report_metadata(cls)
    category_key = get_report_category(cls)

    return Report(
        type=cls,
        key=get_report_key(cls),
        title=meta.title if meta else None,
        category=Category(
            key=category_key,
            title=get_report_category_title(category_key, localizer),
        ),
        permission=meta.permission if meta else None,
    )
