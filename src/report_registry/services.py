"""In-memory collaborator implementations.

Useful for tests, scripts and small deployments where permissions are known
up front. Web applications normally plug in services backed by their own
session and resource stores.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

import structlog

from report_registry.errors import ErrorCode, ReportRegistryError

if TYPE_CHECKING:
    from report_registry.protocols import TextLocalizer

log = structlog.get_logger()

GRANT_ALL = "*"


class DictTextLocalizer:
    """TextLocalizer over a plain mapping."""

    def __init__(self, texts: Mapping[str, str] | None = None) -> None:
        self._texts = dict(texts or {})

    def try_get(self, key: str) -> str | None:
        return self._texts.get(key)


class StaticPermissionService:
    """PermissionService with a fixed set of granted permissions.

    Granting ``"*"`` allows every permission. A service created with
    ``logged_in=False`` denies everything.
    """

    def __init__(self, granted: Iterable[str] = (), logged_in: bool = True) -> None:
        self._granted = frozenset(granted)
        self._logged_in = logged_in

    def has_permission(self, permission: str) -> bool:
        if not self._logged_in:
            return False
        return GRANT_ALL in self._granted or permission in self._granted

    def validate_permission(self, permission: str, localizer: TextLocalizer) -> None:
        if self.has_permission(permission):
            return

        log.info("report_permission_denied", permission=permission, logged_in=self._logged_in)
        if not self._logged_in:
            raise ReportRegistryError(
                ErrorCode.NOT_LOGGED_IN,
                _text(localizer, "Authorization.NotLoggedIn", "You must be logged in."),
            )
        raise ReportRegistryError(
            ErrorCode.PERMISSION_DENIED,
            _text(localizer, "Authorization.AccessDenied", "Access denied."),
        )


def _text(localizer: TextLocalizer | None, key: str, default: str) -> str:
    if localizer is None:
        return default
    text = localizer.try_get(key)
    return default if text is None else text
