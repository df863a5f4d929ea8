"""
Catalog store: the fixed list of systems, loaded once at startup.

The catalog is the universe of valid ``system_id`` values. Edit sessions and
the suggestion post-filter both check ids against it.
"""

from pathlib import Path
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Tuple, Union

from loguru import logger
import yaml

from catalog.models import System


class UnknownSystemError(ValueError):
    """Raised when a system id is not part of the catalog."""

    def __init__(self, system_id: str):
        super().__init__(f"Unknown system id: {system_id!r}")
        self.system_id = system_id


class CatalogStore:
    """Read-only, ordered collection of :class:`System` records."""

    def __init__(self, systems: Iterable[System]):
        by_id: Dict[str, System] = {}
        for system in systems:
            if system.id in by_id:
                raise ValueError(f"Duplicate system id in catalog: {system.id!r}")
            by_id[system.id] = system
        self._systems: Tuple[System, ...] = tuple(by_id.values())
        self._by_id = by_id

    def __len__(self) -> int:
        return len(self._systems)

    def __iter__(self) -> Iterator[System]:
        return iter(self._systems)

    def __contains__(self, system_id: object) -> bool:
        return system_id in self._by_id

    def list(self) -> Tuple[System, ...]:
        return self._systems

    def get(self, system_id: str) -> Optional[System]:
        return self._by_id.get(system_id)

    def ids(self) -> FrozenSet[str]:
        return frozenset(self._by_id)

    def require(self, system_id: str) -> System:
        """Return the system or raise :class:`UnknownSystemError`."""
        system = self._by_id.get(system_id)
        if system is None:
            raise UnknownSystemError(system_id)
        return system

    def names(self) -> Dict[str, str]:
        return {s.id: s.name for s in self._systems}


def load_catalog(path: Union[str, Path]) -> CatalogStore:
    """
    Build a catalog from a YAML file of the form::

        systems:
          - id: ad
            name: Active Directory
            description: User authentication and authorization.
    """
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}

    entries: List[dict] = data.get("systems", []) if isinstance(data, dict) else data
    catalog = CatalogStore(System.from_dict(entry) for entry in entries)
    logger.info(f"Loaded {len(catalog)} systems from {path}")
    return catalog
