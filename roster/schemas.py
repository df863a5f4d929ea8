"""
Pydantic schemas for roster API serialization.

Responses mirror the ``User`` record; each permission additionally carries
the catalog name of its system so a client can render it without a second
lookup.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from catalog.models import System
from roster.models import User, UserStatus


class SystemResponse(BaseModel):
    id: str
    name: str
    description: str = ""

    @classmethod
    def from_system(cls, system: System) -> "SystemResponse":
        return cls(id=system.id, name=system.name, description=system.description)


class PermissionResponse(BaseModel):
    system_id: str
    details: str = ""
    system_name: Optional[str] = Field(
        None,
        description="Catalog name of the system, null if the id is not in the catalog"
    )


class UserResponse(BaseModel):
    """
    Response for one roster entry.

    Example:
        {
            "id": 2,
            "name": "Bob Williams",
            "email": "bob.w@example.com",
            "title": "Project Manager",
            "company": "Innovate Inc.",
            "status": "active",
            "permissions": [
                {"system_id": "bi", "details": "Sales Dashboard", "system_name": "BI Tools"}
            ],
            "quota_email": "25GB",
            "computer_name": "INNOV-LT-002",
            "asset_code": "ASSET-10235"
        }
    """
    id: int
    name: str
    email: str
    title: str
    company: str
    status: UserStatus
    permissions: List[PermissionResponse] = Field(default_factory=list)
    quota_email: str = ""
    computer_name: str = ""
    asset_code: str = ""

    @classmethod
    def from_user(cls, user: User, system_names: Dict[str, str]) -> "UserResponse":
        data = user.to_dict()
        data["permissions"] = [
            PermissionResponse(
                system_id=p.system_id,
                details=p.details,
                system_name=system_names.get(p.system_id),
            )
            for p in user.permissions
        ]
        return cls(**data)


class UserListResponse(BaseModel):
    query: str = ""
    total: int
    users: List[UserResponse]
