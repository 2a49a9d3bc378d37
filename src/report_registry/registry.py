"""Report registry: index building and permission-filtered lookup.

The registry scans its type source once, on first query (or in the
constructor when built eagerly), and keeps two indexes for its lifetime:

- report key → Report
- category key → reports in that category, in type-source order

Both indexes are built under a lock and published together, so concurrent
first queries build exactly once and never observe a half-built index.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from typing import TYPE_CHECKING

import structlog

from report_registry.discovery import discover_report_types
from report_registry.errors import ErrorCode, ReportRegistryError
from report_registry.metadata import is_report_type, qualified_name
from report_registry.models.report import Category, Report, build_report

if TYPE_CHECKING:
    from report_registry.config import Settings
    from report_registry.protocols import PermissionService, TextLocalizer

log = structlog.get_logger()


def _title_sort_key(report: Report) -> str:
    return report.title or ""


def _category_matches(category_key: str, query: str | None) -> bool:
    """Case-insensitive match of ``category_key`` against ``query`` or any parent of it."""
    if not query:
        return True
    # Per-character case mapping; casefold() would equate "ß" with "ss".
    lowered = query.lower()
    candidate = category_key.lower()
    return candidate == lowered or candidate.startswith(lowered + "/")


class ReportRegistry:
    """In-memory index of report classes."""

    def __init__(
        self,
        types: Iterable[type],
        permissions: PermissionService,
        localizer: TextLocalizer,
        *,
        eager: bool = False,
    ) -> None:
        collaborators = {"types": types, "permissions": permissions, "localizer": localizer}
        for name, value in collaborators.items():
            if value is None:
                raise ReportRegistryError(ErrorCode.INVALID_ARGUMENT, f"{name} must not be None")

        self._types = types
        self._permissions = permissions
        self._localizer = localizer

        self._lock = threading.Lock()
        self._built = False
        self._report_by_key: dict[str, Report] = {}
        self._reports_by_category: dict[str, list[Report]] = {}

        if eager:
            self._ensure_built()

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        permissions: PermissionService,
        localizer: TextLocalizer,
    ) -> ReportRegistry:
        """Registry over the report classes found in the configured packages."""
        types = discover_report_types(settings.registry.discovery_packages)
        return cls(types, permissions, localizer, eager=settings.registry.eager_build)

    # ------------------------------------------------------------------
    # Index
    # ------------------------------------------------------------------

    def _ensure_built(self) -> None:
        if self._built:
            return

        with self._lock:
            if self._built:
                return

            report_by_key: dict[str, Report] = {}
            reports_by_category: dict[str, list[Report]] = {}
            scanned = 0

            for cls in self._types:
                scanned += 1
                if not is_report_type(cls):
                    continue

                report = build_report(cls, self._localizer)
                key = report.key.strip() or qualified_name(cls)

                if key in report_by_key:
                    log.warning(
                        "duplicate_report_key",
                        key=key,
                        previous=qualified_name(report_by_key[key].type),
                        replacement=qualified_name(cls),
                    )
                report_by_key[key] = report
                reports_by_category.setdefault(report.category.key, []).append(report)

            self._report_by_key = report_by_key
            self._reports_by_category = reports_by_category
            self._built = True

            log.info(
                "report_index_built",
                types_scanned=scanned,
                reports=len(report_by_key),
                categories=len(reports_by_category),
            )

    def _is_available(self, report: Report) -> bool:
        return report.permission is None or self._permissions.has_permission(report.permission)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_available_reports_in_category(self, category_key: str) -> bool:
        """True if the category holds at least one report the caller may see.

        Only the exact category is considered, not its sub-categories.
        """
        self._ensure_built()

        reports = self._reports_by_category.get(category_key)
        if not reports:
            return False
        return any(self._is_available(report) for report in reports)

    def get_available_reports_in_category(self, category_key: str | None) -> list[Report]:
        """Visible reports in a category and all of its sub-categories, sorted by title.

        An empty or ``None`` category key returns every visible report.
        """
        self._ensure_built()

        result = [
            report
            for key, reports in self._reports_by_category.items()
            if _category_matches(key, category_key)
            for report in reports
            if self._is_available(report)
        ]
        result.sort(key=_title_sort_key)
        return result

    def get_report(self, report_key: str, validate_permission: bool = True) -> Report | None:
        """Look up a report by key.

        Returns ``None`` for an unknown key. Raises ``ReportRegistryError`` when
        no reports are registered at all, and lets the permission service raise
        when the caller lacks the report's permission.
        """
        self._ensure_built()

        if not self._report_by_key:
            raise ReportRegistryError(
                ErrorCode.NO_REPORTS_REGISTERED,
                "report_key: no reports are registered",
            )

        report = self._report_by_key.get(report_key)
        if report is None:
            return None

        if validate_permission and report.permission is not None:
            log.debug("report_permission_check", key=report_key, permission=report.permission)
            self._permissions.validate_permission(report.permission, self._localizer)

        return report

    def reports(self) -> list[Report]:
        """Every registered report, unfiltered, in index order."""
        self._ensure_built()
        return list(self._report_by_key.values())

    def report_keys(self) -> list[str]:
        self._ensure_built()
        return list(self._report_by_key)

    def categories(self) -> list[Category]:
        """One Category per indexed category key, in index order."""
        self._ensure_built()
        return [reports[0].category for reports in self._reports_by_category.values()]
