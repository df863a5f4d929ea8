"""
Business logic for roster reads and deletes.

Sits between the API router and the store: filters, resolves system names
for display, and logs.
"""

from typing import List, Optional
import logging

from catalog.store import CatalogStore
from roster.filters import filter_users
from roster.repository import RosterStore
from roster.schemas import UserListResponse, UserResponse

logger = logging.getLogger(__name__)


class RosterService:
    """Roster operations exposed over the API."""

    @staticmethod
    def list_users(
        store: RosterStore,
        catalog: CatalogStore,
        query: str = ""
    ) -> UserListResponse:
        """
        Return the roster, filtered by ``query``.

        Example:
            RosterService.list_users(store, catalog, query="bob")
            # UserListResponse(query='bob', total=1, users=[...Bob Williams...])
        """
        users = filter_users(store.list(), query)
        names = catalog.names()
        logger.debug(f"Filter '{query}' matched {len(users)} of {len(store)} users")
        return UserListResponse(
            query=query,
            total=len(users),
            users=[UserResponse.from_user(u, names) for u in users],
        )

    @staticmethod
    def get_user(
        store: RosterStore,
        catalog: CatalogStore,
        user_id: int
    ) -> Optional[UserResponse]:
        user = store.get(user_id)
        if user is None:
            logger.warning(f"User {user_id} not found")
            return None
        return UserResponse.from_user(user, catalog.names())

    @staticmethod
    def delete_user(store: RosterStore, user_id: int) -> bool:
        """Remove a user. Deleting an unknown id is a no-op and returns False."""
        return store.remove(user_id)

    @staticmethod
    def systems_without_catalog_entry(store: RosterStore, catalog: CatalogStore) -> List[str]:
        """System ids referenced by some user but missing from the catalog."""
        known = catalog.ids()
        missing = []
        for user in store.list():
            for system_id in user.permission_ids():
                if system_id not in known and system_id not in missing:
                    missing.append(system_id)
        return missing
