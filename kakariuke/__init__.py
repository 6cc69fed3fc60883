from kakariuke.core.data_structures import Morpheme, Bunsetsu, DependencyEdge, ParseResult
from kakariuke.core.exceptions import KakariukeError, NotInitializedError, EmptyInputError
from kakariuke.segmentation import BunsetsuSegmenter
from kakariuke.estimator import DependencyEstimator
from kakariuke.pipeline import DependencyParser

__version__ = "0.1.0"

__all__ = [
    'Morpheme',
    'Bunsetsu',
    'DependencyEdge',
    'ParseResult',
    'KakariukeError',
    'NotInitializedError',
    'EmptyInputError',
    'BunsetsuSegmenter',
    'DependencyEstimator',
    'DependencyParser',
]
