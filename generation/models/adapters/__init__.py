from generation.models.adapters import interface
from generation.models.adapters import openai_compat

from generation.models.adapters.interface import (GeneratorAdapter,)
from generation.models.adapters.openai_compat import (OpenAICompatibleAdapter,
                                                      resolve_api_key,)

__all__ = ['GeneratorAdapter', 'OpenAICompatibleAdapter', 'interface',
           'openai_compat', 'resolve_api_key']
