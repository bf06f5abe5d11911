from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Permission(StrEnum):
    INTERNET = "android.permission.INTERNET"
    ACCESS_NETWORK_STATE = "android.permission.ACCESS_NETWORK_STATE"


@dataclass(frozen=True, slots=True)
class AppManifest:
    package: str
    uses_permissions: frozenset[Permission]

    def declares(self, permission: Permission) -> bool:
        return permission in self.uses_permissions


APP_MANIFEST = AppManifest(
    package="photobrowser",
    uses_permissions=frozenset({Permission.INTERNET, Permission.ACCESS_NETWORK_STATE}),
)
