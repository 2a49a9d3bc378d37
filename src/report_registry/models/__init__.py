from __future__ import annotations

from report_registry.models.report import Category, Report, build_report

__all__ = [
    "Category",
    "Report",
    "build_report",
]
