from generation.postprocessors import base
from generation.postprocessors import catalog_filter

from generation.postprocessors.base import (PostProcessorAdapter,)
from generation.postprocessors.catalog_filter import (
    CatalogFilterPostProcessor, filter_to_catalog, parse_suggestions,)

__all__ = ['CatalogFilterPostProcessor', 'PostProcessorAdapter', 'base',
           'catalog_filter', 'filter_to_catalog', 'parse_suggestions']
