import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from kakariuke.core.data_structures import Bunsetsu, DependencyEdge
from kakariuke.core.tagset import (
    PartOfSpeech,
    PosDetail,
    CONTINUATIVE_PATTERN,
    is_case_particle,
    is_clause_connector,
    is_possessive_particle,
    is_predicate,
)

logger = logging.getLogger(__name__)

_CONTINUATIVE_RE = re.compile(CONTINUATIVE_PATTERN)


# ============================================================
# Forward searches
# ============================================================

def find_next_predicate(index: int, bunsetsu: Sequence[Bunsetsu]) -> int:
    """Nearest following verb/adjective-headed bunsetsu, else the last one."""
    for j in range(index + 1, len(bunsetsu)):
        if is_predicate(bunsetsu[j].head):
            return j
    return len(bunsetsu) - 1


def find_next_verb(index: int, bunsetsu: Sequence[Bunsetsu]) -> int:
    """Nearest following verb-headed bunsetsu, else the last one (usually the main predicate)."""
    for j in range(index + 1, len(bunsetsu)):
        if bunsetsu[j].head.pos == PartOfSpeech.VERB:
            return j
    return len(bunsetsu) - 1


def find_next_noun(index: int, bunsetsu: Sequence[Bunsetsu]) -> int:
    """Nearest following noun-headed bunsetsu, else the adjacent one (not the last)."""
    for j in range(index + 1, len(bunsetsu)):
        if bunsetsu[j].head.pos == PartOfSpeech.NOUN:
            return j
    return index + 1


def find_next_noun_or_verb(index: int, bunsetsu: Sequence[Bunsetsu]) -> Optional[int]:
    for j in range(index + 1, len(bunsetsu)):
        if bunsetsu[j].head.pos in (PartOfSpeech.NOUN, PartOfSpeech.VERB):
            return j
    return None


def next_bunsetsu(index: int, bunsetsu: Sequence[Bunsetsu]) -> int:
    return index + 1


# ============================================================
# Rule predicates (over the source bunsetsu only)
# ============================================================

def ends_with_clause_connector(source: Bunsetsu) -> bool:
    return is_clause_connector(source.last_token)


def ends_with_case_particle(source: Bunsetsu) -> bool:
    return is_case_particle(source.last_token)


def ends_with_possessive_particle(source: Bunsetsu) -> bool:
    return is_possessive_particle(source.last_token)


def has_adverb_head(source: Bunsetsu) -> bool:
    return source.head.pos == PartOfSpeech.ADVERB


def has_adnominal_head(source: Bunsetsu) -> bool:
    return source.head.pos == PartOfSpeech.ADNOMINAL


def is_bare_noun(source: Bunsetsu) -> bool:
    return source.head.pos == PartOfSpeech.NOUN and source.last_token.pos != PartOfSpeech.PARTICLE


def is_non_final_verb(source: Bunsetsu) -> bool:
    head = source.head
    if head.pos != PartOfSpeech.VERB:
        return False
    return (head.pos_detail_1 != PosDetail.INDEPENDENT
            or _CONTINUATIVE_RE.search(source.last_token.surface) is not None)


def always(source: Bunsetsu) -> bool:
    return True


@dataclass(frozen=True)
class AttachmentRule:
    """
    One step of target resolution. `resolve` may return None, in which case
    the next rule in the list is tried.
    """
    name: str
    applies: Callable[[Bunsetsu], bool]
    resolve: Callable[[int, Sequence[Bunsetsu]], Optional[int]]


# Order is precedence: the first rule that applies and resolves wins
DEFAULT_RULES: Tuple[AttachmentRule, ...] = (
    AttachmentRule("clause_connector", ends_with_clause_connector, find_next_predicate),
    AttachmentRule("case_particle", ends_with_case_particle, find_next_verb),
    AttachmentRule("possessive_particle", ends_with_possessive_particle, find_next_noun),
    AttachmentRule("adverb", has_adverb_head, find_next_predicate),
    AttachmentRule("adnominal", has_adnominal_head, find_next_noun),
    AttachmentRule("bare_noun", is_bare_noun, find_next_noun_or_verb),
    AttachmentRule("non_final_verb", is_non_final_verb, find_next_predicate),
    AttachmentRule("adjacent", always, next_bunsetsu),
)


class DependencyEstimator:
    """
    Rule-based dependency estimation over an ordered bunsetsu list.
    Every bunsetsu except the last receives exactly one edge.
    """

    def __init__(self, rules: Sequence[AttachmentRule] = DEFAULT_RULES):
        self.rules = tuple(rules)

    def estimate(self, bunsetsu: Sequence[Bunsetsu]) -> List[DependencyEdge]:
        dependencies = []

        for i in range(len(bunsetsu) - 1):
            target = self.find_target(i, bunsetsu)
            dependencies.append(DependencyEdge(
                from_=i,
                to=target,
                label=self.label(bunsetsu, i, target),
            ))

        return dependencies

    def find_target(self, index: int, bunsetsu: Sequence[Bunsetsu]) -> int:
        return self.explain(index, bunsetsu)[0]

    def explain(self, index: int, bunsetsu: Sequence[Bunsetsu]) -> Tuple[int, str]:
        """
        Returns (target index, name of the rule that produced it).
        """
        source = bunsetsu[index]

        for rule in self.rules:
            if not rule.applies(source):
                continue
            target = rule.resolve(index, bunsetsu)
            if target is None:
                continue
            logger.debug(f"Bunsetsu {index} '{source.surface}' -> {target} via {rule.name}")
            return target, rule.name

        # Only reachable with a custom rule list lacking a catch-all
        return index + 1, "adjacent"

    @staticmethod
    def label(bunsetsu: Sequence[Bunsetsu], index: int, target: int) -> str:
        """Surface of the source's final particle, or ''. The target is not consulted."""
        last_token = bunsetsu[index].last_token
        if last_token.pos == PartOfSpeech.PARTICLE:
            return last_token.surface
        return ""
