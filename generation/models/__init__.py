from generation.models import adapters

from generation.models.adapters import (GeneratorAdapter,
                                        OpenAICompatibleAdapter, interface,
                                        openai_compat,)

__all__ = ['GeneratorAdapter', 'OpenAICompatibleAdapter', 'adapters',
           'interface', 'openai_compat']
