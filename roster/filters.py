from typing import Iterable, List

from roster.models import User

SEARCH_FIELDS = ("name", "email", "title", "company")


def matches(user: User, query: str) -> bool:
    needle = query.lower()
    return any(needle in getattr(user, name).lower() for name in SEARCH_FIELDS)


def filter_users(users: Iterable[User], query: str) -> List[User]:
    """
    Users whose name, email, title or company contains ``query``.

    Case-insensitive substring match, source order kept. An empty query
    returns everything; the query is not trimmed.
    """
    if not query:
        return list(users)
    return [user for user in users if matches(user, query)]
