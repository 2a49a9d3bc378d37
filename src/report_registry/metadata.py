"""Report markers: class decorators that describe a report.

A class becomes a report by carrying the ``@report`` marker. The other markers
(``@category``, ``@display_name``, ``@required_permission``) add optional
details and may be stacked in any order::

    @report(key="sales/summary")
    @category("Sales")
    @display_name("Sales Summary")
    @required_permission("Reports:Sales")
    class SalesSummary:
        ...

Markers are stored on the decorated class itself and are never inherited: a
subclass of a report is not a report unless it is decorated too.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

T = TypeVar("T", bound=type)

METADATA_ATTR = "__report_metadata__"

# Stored when a permission marker is present but carries no value.
UNKNOWN_PERMISSION = "?"


@dataclass(frozen=True)
class ReportMetadata:
    """Markers collected from a single class."""

    is_report: bool = False
    key: str | None = None
    category: str | None = None
    title: str | None = None
    permission: str | None = None


def get_report_metadata(cls: Any) -> ReportMetadata | None:
    """Return the markers declared directly on ``cls``, or ``None``."""
    if not isinstance(cls, type):
        return None
    meta = cls.__dict__.get(METADATA_ATTR)
    if not isinstance(meta, ReportMetadata):
        return None
    return meta


def _update(cls: T, **changes: Any) -> T:
    meta = get_report_metadata(cls) or ReportMetadata()
    setattr(cls, METADATA_ATTR, dataclasses.replace(meta, **changes))
    return cls


def _as_text(value: Any) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def report(key: str | None = None) -> Callable[[T], T]:
    """Mark a class as a report, optionally with an explicit key."""

    def decorate(cls: T) -> T:
        return _update(cls, is_report=True, key=_as_text(key))

    return decorate


def category(key: str | None) -> Callable[[T], T]:
    """Place a report in a ``/``-separated category, e.g. ``"Sales/Detail"``."""

    def decorate(cls: T) -> T:
        return _update(cls, category=_as_text(key))

    return decorate


def display_name(title: str | None) -> Callable[[T], T]:
    def decorate(cls: T) -> T:
        return _update(cls, title=_as_text(title))

    return decorate


def required_permission(permission: str | None) -> Callable[[T], T]:
    """Restrict a report to callers holding ``permission``."""

    def decorate(cls: T) -> T:
        return _update(cls, permission=_as_text(permission) or UNKNOWN_PERMISSION)

    return decorate


def is_report_type(cls: Any) -> bool:
    meta = get_report_metadata(cls)
    return meta is not None and meta.is_report


def qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def get_report_key(cls: type) -> str:
    """Explicit report key, or the class's fully-qualified name."""
    meta = get_report_metadata(cls)
    if meta is None or not meta.is_report or not meta.key:
        return qualified_name(cls)
    return meta.key


def get_report_category(cls: type) -> str:
    meta = get_report_metadata(cls)
    if meta is None or meta.category is None:
        return ""
    return meta.category
