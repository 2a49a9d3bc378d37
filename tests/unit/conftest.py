"""Unit-specific fixtures (in-memory collaborators only)."""

from __future__ import annotations

import pytest
from sample_reports import SAMPLE_TYPES, RecordingPermissions

from report_registry.services import DictTextLocalizer


@pytest.fixture()
def sample_types() -> list[type]:
    return list(SAMPLE_TYPES)


@pytest.fixture()
def localizer() -> DictTextLocalizer:
    return DictTextLocalizer({"Report.Category.Sales.Detail": "Sales Details"})


@pytest.fixture()
def permissions() -> RecordingPermissions:
    return RecordingPermissions()
