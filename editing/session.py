"""
Edit sessions: the uncommitted draft of one user's profile and grants.

A session is opened in ``add`` mode (blank draft) or ``edit`` mode (seeded
from an existing user), mutated field by field, and turned back into a
``User`` by ``commit``. Nothing reaches the roster until the caller stores
the committed record.
"""

from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from catalog.store import CatalogStore
from editing.exceptions import UnknownFieldError
from roster.models import PROFILE_FIELDS, Permission, User, UserStatus


class SessionMode(str, Enum):
    ADD = "add"
    EDIT = "edit"


class PermissionSet:
    """
    Ordered map of ``system_id -> details``.

    Iteration follows insertion order. Removing a system and adding it back
    moves it to the end with empty details.
    """

    def __init__(self, entries: Iterable[Tuple[str, str]] = ()):
        self._entries: Dict[str, str] = {}
        for system_id, details in entries:
            self._entries[system_id] = details

    @classmethod
    def from_permissions(cls, permissions: Iterable[Permission]) -> "PermissionSet":
        return cls((p.system_id, p.details) for p in permissions)

    def __contains__(self, system_id: object) -> bool:
        return system_id in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def items(self):
        return self._entries.items()

    def details(self, system_id: str) -> Optional[str]:
        return self._entries.get(system_id)

    def toggle(self, system_id: str) -> bool:
        """Flip membership; returns True if the system is now present."""
        if system_id in self._entries:
            del self._entries[system_id]
            return False
        self._entries[system_id] = ""
        return True

    def set_details(self, system_id: str, details: str) -> bool:
        """Set details for a present system; absent systems are left alone."""
        if system_id not in self._entries:
            return False
        self._entries[system_id] = details
        return True

    def replace(self, system_ids: Iterable[str]) -> None:
        """Drop everything and hold exactly ``system_ids``, each with empty details."""
        self._entries = {system_id: "" for system_id in system_ids}

    def to_permissions(self) -> List[Permission]:
        return [Permission(system_id, details) for system_id, details in self._entries.items()]


class EditSession:
    """Transient form state for adding or editing one user."""

    def __init__(self, catalog: CatalogStore, source: Optional[User] = None):
        self.catalog = catalog
        self.mode = SessionMode.ADD if source is None else SessionMode.EDIT
        self.source_id: Optional[int] = source.id if source is not None else None

        if source is None:
            self.fields: Dict[str, str] = {name: "" for name in PROFILE_FIELDS}
            self.status = UserStatus.ACTIVE
            self.permissions = PermissionSet()
        else:
            self.fields = {name: getattr(source, name) for name in PROFILE_FIELDS}
            self.status = source.status
            self.permissions = PermissionSet.from_permissions(source.permissions)

    @property
    def title(self) -> str:
        return self.fields["title"]

    def set_field(self, name: str, value: str) -> None:
        if name not in self.fields:
            raise UnknownFieldError(name)
        self.fields[name] = value

    def set_status(self, status) -> None:
        """Select ``active`` or ``blocked``; this is a choice, not a toggle."""
        self.status = UserStatus(status)

    def toggle_permission(self, system_id: str) -> bool:
        self.catalog.require(system_id)
        return self.permissions.toggle(system_id)

    def set_permission_details(self, system_id: str, details: str) -> bool:
        return self.permissions.set_details(system_id, details)

    def apply_suggestions(self, system_ids: Iterable[str]) -> None:
        """
        Replace the whole permission set with ``system_ids``.

        Details typed so far are discarded, including for systems that stay
        selected.
        """
        system_ids = list(system_ids)
        for system_id in system_ids:
            self.catalog.require(system_id)
        self.permissions.replace(system_ids)

    def commit(self) -> User:
        """Build the user record to hand to the roster; ``id`` is None in add mode."""
        return User(
            id=self.source_id if self.mode is SessionMode.EDIT else None,
            status=self.status,
            permissions=self.permissions.to_permissions(),
            **self.fields,
        )
