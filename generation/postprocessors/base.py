# generation/postprocessors/base.py

from abc import ABC, abstractmethod
from typing import Iterable, List

from catalog.models import System


class PostProcessorAdapter(ABC):
    """
    Abstract base for post-processing raw suggestion output.
    """

    @abstractmethod
    def process(self, raw_answer: str, catalog: Iterable[System]) -> List[str]:
        """
        Given the raw model text and the catalog it was asked about,
        return the usable system ids.
        """
        raise NotImplementedError
