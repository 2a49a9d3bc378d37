from __future__ import annotations

from report_registry.categories import get_report_category_title
from report_registry.config import Settings
from report_registry.discovery import discover_report_types, iter_module_types
from report_registry.errors import ErrorCode, ReportRegistryError
from report_registry.logging_config import configure_logging
from report_registry.metadata import (
    category,
    display_name,
    get_report_category,
    get_report_key,
    report,
    required_permission,
)
from report_registry.models import Category, Report, build_report
from report_registry.protocols import PermissionService, TextLocalizer
from report_registry.registry import ReportRegistry
from report_registry.services import DictTextLocalizer, StaticPermissionService

__all__ = [
    # registry
    "ReportRegistry",
    "Report",
    "Category",
    "build_report",
    "get_report_category_title",
    # markers
    "report",
    "category",
    "display_name",
    "required_permission",
    "get_report_key",
    "get_report_category",
    # type sources
    "discover_report_types",
    "iter_module_types",
    # collaborators
    "PermissionService",
    "TextLocalizer",
    "StaticPermissionService",
    "DictTextLocalizer",
    # config
    "Settings",
    "configure_logging",
    # errors
    "ErrorCode",
    "ReportRegistryError",
]
