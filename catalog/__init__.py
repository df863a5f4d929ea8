from catalog import models
from catalog import store

from catalog.models import (System,)
from catalog.store import (CatalogStore, UnknownSystemError, load_catalog,)

__all__ = ['CatalogStore', 'System', 'UnknownSystemError', 'load_catalog',
           'models', 'store']
