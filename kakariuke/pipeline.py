import logging
from typing import Any, Dict, List, Optional, Sequence

from kakariuke.core.interfaces import BaseAnalyzer
from kakariuke.core.data_structures import Morpheme, ParseResult
from kakariuke.core.exceptions import EmptyInputError, NotInitializedError
from kakariuke.engines.janome_engine import JanomeAnalyzer
from kakariuke.segmentation import BunsetsuSegmenter
from kakariuke.estimator import DependencyEstimator
from kakariuke.validators import ResultValidator

logger = logging.getLogger(__name__)


class DependencyParser:
    """
    Main orchestrator.
    Text -> morphemes (analyzer) -> bunsetsu (segmenter) -> dependencies (estimator).

    The analyzer must be initialized before parse() is called; parse_morphemes()
    works on an already tokenized stream and needs no analyzer at all.
    """

    def __init__(
        self,
        analyzer: Optional[BaseAnalyzer] = None,
        segmenter: Optional[BunsetsuSegmenter] = None,
        estimator: Optional[DependencyEstimator] = None,
        validate: bool = False,
        require_non_empty: bool = False,
    ):
        self.analyzer = analyzer if analyzer is not None else JanomeAnalyzer()
        self.segmenter = segmenter or BunsetsuSegmenter()
        self.estimator = estimator or DependencyEstimator()
        self.validate = validate
        self.require_non_empty = require_non_empty

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> "DependencyParser":
        analyzer_cfg = cfg.get("analyzer", {})
        parser_cfg = cfg.get("parser", {})

        analyzer = JanomeAnalyzer(
            udic=analyzer_cfg.get("udic"),
            udic_enc=analyzer_cfg.get("udic_enc", "utf8"),
            udic_type=analyzer_cfg.get("udic_type", "ipadic"),
        )
        return cls(
            analyzer=analyzer,
            validate=parser_cfg.get("validate", False),
            require_non_empty=parser_cfg.get("require_non_empty", False),
        )

    @property
    def is_ready(self) -> bool:
        return self.analyzer.is_ready

    def initialize(self) -> None:
        self.analyzer.initialize()

    async def initialize_async(self) -> None:
        await self.analyzer.initialize_async()

    def parse(self, text: str) -> ParseResult:
        if not self.analyzer.is_ready:
            raise NotInitializedError()

        if self.require_non_empty and not text.strip():
            raise EmptyInputError("Input text is empty")

        morphemes = self.analyzer.tokenize(text)
        return self.parse_morphemes(morphemes, text=text)

    def parse_morphemes(self, morphemes: Sequence[Morpheme], text: Optional[str] = None) -> ParseResult:
        if self.require_non_empty and not morphemes:
            raise EmptyInputError("Morpheme sequence is empty")

        tokens: List[Morpheme] = list(morphemes)

        # 1. Bunsetsu segmentation
        bunsetsu = self.segmenter.segment(tokens)

        # 2. Dependency estimation
        dependencies = self.estimator.estimate(bunsetsu)

        result = ParseResult(
            text=text if text is not None else "".join(m.surface for m in tokens),
            bunsetsu=bunsetsu,
            dependencies=dependencies,
            tokens=tokens,
        )

        if self.validate:
            validation = ResultValidator.validate(result)
            for error in validation.errors:
                logger.warning(f"Invalid parse for '{result.text}': {error}")

        return result
