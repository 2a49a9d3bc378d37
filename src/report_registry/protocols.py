"""Collaborator interfaces consumed by the registry.

The host application supplies concrete implementations; ``services.py``
holds simple in-memory ones.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TextLocalizer(Protocol):
    def try_get(self, key: str) -> str | None:
        """Return the localized text for ``key``, or ``None`` if there is none."""
        ...


@runtime_checkable
class PermissionService(Protocol):
    def has_permission(self, permission: str) -> bool: ...

    def validate_permission(self, permission: str, localizer: TextLocalizer) -> None:
        """Raise if the current caller does not hold ``permission``."""
        ...
