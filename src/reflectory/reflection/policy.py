from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AccessPolicy:
    """
    Decides which class members a reflector may use.
    """

    allow_private_access: bool = True
    """
    Whether members whose name starts with a single underscore may be read and written.
    When disabled such members are skipped silently, as if they were not declared.
    """

    def can_access(self, name: str) -> bool:
        return self.allow_private_access or not name.startswith("_")
