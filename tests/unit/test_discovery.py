"""Unit tests for report_registry.discovery."""

from __future__ import annotations

import sys
import textwrap
from typing import TYPE_CHECKING

import pytest

from report_registry.config import RegistrySettings, Settings
from report_registry.discovery import discover_report_types, iter_module_types
from report_registry.registry import ReportRegistry
from report_registry.services import DictTextLocalizer, StaticPermissionService

if TYPE_CHECKING:
    from pathlib import Path

_SALES = """
from report_registry import category, display_name, report

from shared_helpers import Helper


@report(key="sales/summary")
@category("Sales")
@display_name("Sales Summary")
class SalesSummary:
    pass


class NotAReport:
    pass
"""

_STOCK = """
from report_registry import category, display_name, report, required_permission


@report()
@category("Inventory/Stock")
@display_name("Stock Levels")
@required_permission("Inventory:View")
class StockLevels:
    pass
"""

_PRIVATE = """
from report_registry import report


@report(key="hidden")
class Hidden:
    pass
"""

_INTERNAL_INIT = """
raise RuntimeError("private packages must not be imported by discovery")
"""


@pytest.fixture()
def report_package(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """Write a throwaway package of report modules and put it on sys.path."""
    name = "acme_reports"
    root = tmp_path / name
    (root / "inventory").mkdir(parents=True)
    (root / "__init__.py").write_text("")
    (root / "sales.py").write_text(textwrap.dedent(_SALES))
    (root / "_private.py").write_text(textwrap.dedent(_PRIVATE))
    (root / "_internal").mkdir()
    (root / "_internal" / "__init__.py").write_text(textwrap.dedent(_INTERNAL_INIT))
    (root / "_internal" / "tools.py").write_text(textwrap.dedent(_PRIVATE))
    (root / "inventory" / "__init__.py").write_text("")
    (root / "inventory" / "stock.py").write_text(textwrap.dedent(_STOCK))
    (tmp_path / "shared_helpers.py").write_text("class Helper:\n    pass\n")

    monkeypatch.syspath_prepend(str(tmp_path))
    yield name
    for module in list(sys.modules):
        if module == name or module.startswith(f"{name}.") or module == "shared_helpers":
            del sys.modules[module]


class TestIterModuleTypes:
    def test_skips_imported_classes(self, report_package: str) -> None:
        import importlib

        module = importlib.import_module(f"{report_package}.sales")
        names = [cls.__name__ for cls in iter_module_types(module)]
        assert names == ["SalesSummary", "NotAReport"]


class TestDiscoverReportTypes:
    def test_finds_reports_in_subpackages(self, report_package: str) -> None:
        names = {cls.__name__ for cls in discover_report_types(report_package)}
        assert names == {"SalesSummary", "StockLevels"}

    def test_accepts_several_packages(self, report_package: str) -> None:
        found = discover_report_types([report_package, f"{report_package}.inventory"])
        # Classes are reported once even when packages overlap.
        assert sorted(cls.__name__ for cls in found) == ["SalesSummary", "StockLevels"]

    def test_private_subpackage_skipped(self, report_package: str) -> None:
        found = discover_report_types(report_package)
        assert all("._internal" not in cls.__module__ for cls in found)
        assert f"{report_package}._internal" not in sys.modules
        assert f"{report_package}._internal.tools" not in sys.modules

    def test_missing_package_raises(self) -> None:
        with pytest.raises(ModuleNotFoundError):
            discover_report_types("no_such_report_package")


class TestRegistryFromSettings:
    def test_discovered_reports_are_queryable(self, report_package: str) -> None:
        settings = Settings(registry=RegistrySettings(discovery_packages=[report_package]))
        registry = ReportRegistry.from_settings(
            settings,
            StaticPermissionService({"Inventory:View"}),
            DictTextLocalizer({"Report.Category.Inventory.Stock": "Stock"}),
        )

        stock = registry.get_report(f"{report_package}.inventory.stock.StockLevels")
        assert stock is not None
        assert stock.category.title == "Stock"
        assert [r.title for r in registry.get_available_reports_in_category("inventory")] == [
            "Stock Levels"
        ]
        assert registry.get_report("hidden") is None
