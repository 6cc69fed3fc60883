# kakariuke/core/interfaces.py
import asyncio
from abc import ABC, abstractmethod
from typing import List
from .data_structures import Morpheme


class BaseAnalyzer(ABC):
    """
    Morphological analyzer used by the parser.
    Loading is a one-time, possibly slow step; tokenize() is only valid afterwards.
    """

    @property
    @abstractmethod
    def is_ready(self) -> bool:
        pass

    @abstractmethod
    def initialize(self) -> None:
        """Loads dictionaries. Calling it again is a no-op."""
        pass

    async def initialize_async(self) -> None:
        await asyncio.to_thread(self.initialize)

    @abstractmethod
    def tokenize(self, text: str) -> List[Morpheme]:
        """Returns the ordered morpheme sequence for the text."""
        pass
