"""Type sources: find report classes by scanning packages.

Each module in the scanned package may define any number of report classes.
Modules whose name starts with ``_`` are skipped, so packages can keep
private helpers next to their reports.
"""

from __future__ import annotations

import importlib
import inspect
import pkgutil
from collections.abc import Iterable, Iterator
from types import ModuleType

import structlog

from report_registry.metadata import is_report_type

log = structlog.get_logger()


def iter_module_types(module: ModuleType) -> Iterator[type]:
    """Yield classes defined in ``module`` (not imported into it), in definition order."""
    for obj in vars(module).values():
        if inspect.isclass(obj) and obj.__module__ == module.__name__:
            yield obj


def _iter_submodules(package: ModuleType) -> Iterator[ModuleType]:
    path = getattr(package, "__path__", None)
    if path is None:
        return  # plain module, nothing to walk

    for info in pkgutil.iter_modules(path, prefix=f"{package.__name__}."):
        leaf = info.name.rsplit(".", 1)[-1]
        if leaf.startswith("_"):
            continue  # private modules and everything under private packages
        module = importlib.import_module(info.name)
        yield module
        if info.ispkg:
            yield from _iter_submodules(module)


def _iter_modules(package_name: str) -> Iterator[ModuleType]:
    package = importlib.import_module(package_name)
    yield package
    yield from _iter_submodules(package)


def discover_report_types(package_names: str | Iterable[str]) -> list[type]:
    """Import the given packages and return every class carrying a report marker."""
    packages = [package_names] if isinstance(package_names, str) else list(package_names)

    found: list[type] = []
    seen: set[type] = set()
    for package_name in packages:
        for module in _iter_modules(package_name):
            for cls in iter_module_types(module):
                if cls in seen or not is_report_type(cls):
                    continue
                seen.add(cls)
                found.append(cls)

    log.debug("report_types_discovered", packages=packages, count=len(found))
    return found
