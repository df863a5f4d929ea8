"""
Reference data for the systems a user can be granted access to.
"""

from dataclasses import dataclass
from typing import Dict, Any


@dataclass(frozen=True)
class System:
    """A backend system from the catalog (directory, ERP, mail, ...)."""
    id: str
    name: str
    description: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "System":
        return cls(
            id=str(data["id"]),
            name=str(data.get("name") or data["id"]),
            description=str(data.get("description") or ""),
        )
