"""
In-memory records for the user roster.

A ``User`` owns its ``permissions`` list outright. Stores hand out copies
(``User.copy``) so no two records ever share a list.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional


class UserStatus(str, Enum):
    ACTIVE = "active"
    BLOCKED = "blocked"


@dataclass
class Permission:
    """A grant of one system to one user, with free-text details."""
    system_id: str
    details: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"system_id": self.system_id, "details": self.details}


PROFILE_FIELDS = (
    "name",
    "email",
    "title",
    "company",
    "quota_email",
    "computer_name",
    "asset_code",
)


@dataclass
class User:
    """
    A roster entry.

    ``id`` is ``None`` until the roster assigns one on ``add``.
    """
    id: Optional[int] = None
    name: str = ""
    email: str = ""
    title: str = ""
    company: str = ""
    status: UserStatus = UserStatus.ACTIVE
    permissions: List[Permission] = field(default_factory=list)
    quota_email: str = ""
    computer_name: str = ""
    asset_code: str = ""

    def copy(self, **changes) -> "User":
        changes.setdefault(
            "permissions",
            [Permission(p.system_id, p.details) for p in self.permissions],
        )
        return replace(self, **changes)

    def permission_ids(self) -> List[str]:
        return [p.system_id for p in self.permissions]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "title": self.title,
            "company": self.company,
            "status": self.status.value,
            "permissions": [p.to_dict() for p in self.permissions],
            "quota_email": self.quota_email,
            "computer_name": self.computer_name,
            "asset_code": self.asset_code,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        permissions = [
            Permission(str(p["system_id"]), str(p.get("details") or ""))
            for p in data.get("permissions") or []
        ]
        raw_id = data.get("id")
        return cls(
            id=int(raw_id) if raw_id is not None else None,
            status=UserStatus(data.get("status") or UserStatus.ACTIVE.value),
            permissions=permissions,
            **{name: str(data.get(name) or "") for name in PROFILE_FIELDS},
        )
