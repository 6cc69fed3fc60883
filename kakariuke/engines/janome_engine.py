# kakariuke/engines/janome_engine.py
import logging
import threading
from typing import List, Optional
from janome.tokenizer import Tokenizer

from kakariuke.core.interfaces import BaseAnalyzer
from kakariuke.core.data_structures import Morpheme
from kakariuke.core.exceptions import NotInitializedError

logger = logging.getLogger(__name__)


class JanomeAnalyzer(BaseAnalyzer):
    """
    IPADIC morphological analysis via janome.
    The dictionary is loaded once in initialize(); tokenize() raises until then.
    """

    def __init__(self, udic: Optional[str] = None, udic_enc: str = "utf8", udic_type: str = "ipadic"):
        self.udic = udic
        self.udic_enc = udic_enc
        self.udic_type = udic_type
        self._tokenizer: Optional[Tokenizer] = None
        self._lock = threading.Lock()

    @property
    def is_ready(self) -> bool:
        return self._tokenizer is not None

    def initialize(self) -> None:
        with self._lock:
            if self._tokenizer is not None:
                return

            logger.info("Loading janome IPADIC tokenizer...")
            if self.udic:
                logger.info(f"Using user dictionary {self.udic} ({self.udic_type}, {self.udic_enc})")
                self._tokenizer = Tokenizer(self.udic, udic_enc=self.udic_enc, udic_type=self.udic_type)
            else:
                self._tokenizer = Tokenizer()
            logger.info("janome tokenizer ready.")

    def tokenize(self, text: str) -> List[Morpheme]:
        if self._tokenizer is None:
            raise NotInitializedError()

        if not text:
            return []

        return [self._to_morpheme(token) for token in self._tokenizer.tokenize(text)]

    def _to_morpheme(self, token) -> Morpheme:
        # part_of_speech: "名詞,固有名詞,人名,名"
        pos_fields = token.part_of_speech.split(',')
        pos = pos_fields[0]
        pos_detail_1 = pos_fields[1] if len(pos_fields) > 1 else "*"

        # Unknown words come back with base_form "*"
        base_form = token.base_form if token.base_form and token.base_form != "*" else token.surface
        reading = token.reading if token.reading and token.reading != "*" else None

        return Morpheme(
            surface=token.surface,
            pos=pos,
            pos_detail_1=pos_detail_1,
            base_form=base_form,
            reading=reading,
        )
