"""
Data access layer for the roster.

The roster lives in process memory: a restart reloads the seed file and
discards every edit. ``RosterStore`` is built once by the app factory and
passed to whatever needs it; there is no module-level instance.

Store methods:
- add: assign a fresh id and append
- update: replace a record in place (no-op for unknown ids)
- remove: delete by id (no-op for unknown ids)
- get / list
"""

from itertools import count
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union
import logging
import threading

import yaml

from catalog.store import CatalogStore
from roster.models import User

logger = logging.getLogger(__name__)


class RosterStore:
    """
    Ordered, in-memory collection of users keyed by id.

    Insertion order is list order. ``update`` keeps a record's position and
    ``remove`` keeps the relative order of the rest.
    """

    def __init__(self, users: Optional[Iterable[User]] = None):
        self._users: Dict[int, User] = {}
        self.lock = threading.Lock()
        self._ids = count(1)
        if users:
            self.seed(users)

    def __len__(self) -> int:
        return len(self._users)

    def seed(self, users: Iterable[User]) -> None:
        """Insert records that already carry ids (startup data)."""
        with self.lock:
            for user in users:
                if user.id is None:
                    raise ValueError(f"Seed user {user.name!r} has no id")
                if user.id in self._users:
                    raise ValueError(f"Duplicate user id in seed data: {user.id}")
                system_ids = user.permission_ids()
                if len(set(system_ids)) != len(system_ids):
                    raise ValueError(f"Seed user {user.id} lists a system more than once: {system_ids}")
                self._users[user.id] = user.copy()
            next_id = max(self._users, default=0) + 1
            self._ids = count(next_id)

    def add(self, user: User) -> User:
        """
        Store ``user`` under a newly assigned id and return the stored copy.

        Any id already on ``user`` is ignored.
        """
        with self.lock:
            new_id = next(self._ids)
            while new_id in self._users:
                new_id = next(self._ids)
            stored = user.copy(id=new_id)
            self._users[new_id] = stored

        logger.info(f"Added user {new_id} ({stored.email or stored.name})")
        return stored.copy()

    def update(self, user: User) -> bool:
        """
        Replace the stored record with the same id.

        Returns False, changing nothing, when no record has that id.
        """
        with self.lock:
            if user.id is None or user.id not in self._users:
                logger.warning(f"Update skipped: user {user.id} not in roster")
                return False
            self._users[user.id] = user.copy()

        logger.info(f"Updated user {user.id}")
        return True

    def remove(self, user_id: int) -> bool:
        """Delete the record with ``user_id``; False if there was none."""
        with self.lock:
            removed = self._users.pop(user_id, None)

        if removed is None:
            logger.debug(f"Remove skipped: user {user_id} not in roster")
            return False
        logger.info(f"Removed user {user_id}")
        return True

    def get(self, user_id: int) -> Optional[User]:
        with self.lock:
            user = self._users.get(user_id)
            return user.copy() if user else None

    def list(self) -> List[User]:
        with self.lock:
            return [user.copy() for user in self._users.values()]


def load_roster(path: Union[str, Path, None], catalog: Optional[CatalogStore] = None) -> RosterStore:
    """
    Build a roster from a YAML seed file (``users:`` list).

    An empty path gives an empty roster. With a ``catalog``, every grant must
    name a catalog system or ``UnknownSystemError`` is raised.
    """
    if not path:
        return RosterStore()

    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}

    entries = data.get("users", []) if isinstance(data, dict) else data
    users = [User.from_dict(entry) for entry in entries]
    if catalog is not None:
        for user in users:
            for system_id in user.permission_ids():
                catalog.require(system_id)
    store = RosterStore(users)
    logger.info(f"Seeded roster with {len(store)} users from {path}")
    return store
