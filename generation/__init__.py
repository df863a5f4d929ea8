from generation import exceptions
from generation import models
from generation import postprocessors
from generation import prompts
from generation import suggestions

from generation.exceptions import (SuggestionFailedError,)
from generation.models import (GeneratorAdapter, OpenAICompatibleAdapter,
                               adapters,)
from generation.postprocessors import (CatalogFilterPostProcessor,
                                       PostProcessorAdapter,
                                       filter_to_catalog, parse_suggestions,)
from generation.suggestions import (PermissionSuggestionClient,
                                    SUGGESTION_SCHEMA,)

__all__ = ['CatalogFilterPostProcessor', 'GeneratorAdapter',
           'OpenAICompatibleAdapter', 'PermissionSuggestionClient',
           'PostProcessorAdapter', 'SUGGESTION_SCHEMA',
           'SuggestionFailedError', 'adapters', 'exceptions',
           'filter_to_catalog', 'models', 'parse_suggestions',
           'postprocessors', 'prompts', 'suggestions']
