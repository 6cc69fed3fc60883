import logging
from typing import List, Sequence

from kakariuke.core.data_structures import Bunsetsu, Morpheme
from kakariuke.core.tagset import is_content_word, is_function_word, is_symbol, head_priority

logger = logging.getLogger(__name__)


class BunsetsuSegmenter:
    """
    Groups a flat morpheme sequence into bunsetsu and picks a head for each.
    Stateless: one instance can serve any number of calls.
    """

    def segment(self, morphemes: Sequence[Morpheme]) -> List[Bunsetsu]:
        """
        Left-to-right scan. A run closes after a morpheme when
        1. it is the last morpheme,
        2. it is a symbol,
        3. it is a function word and the next morpheme is a content word.
        """
        bunsetsu_list: List[Bunsetsu] = []
        current: List[Morpheme] = []

        for i, morpheme in enumerate(morphemes):
            current.append(morpheme)

            is_last = i == len(morphemes) - 1
            should_close = is_last or is_symbol(morpheme)

            if not should_close:
                next_morpheme = morphemes[i + 1]
                should_close = is_function_word(morpheme) and is_content_word(next_morpheme)

            if should_close:
                bunsetsu_list.append(self.make_bunsetsu(len(bunsetsu_list), current))
                current = []

        logger.debug(f"Segmented {len(morphemes)} morphemes into {len(bunsetsu_list)} bunsetsu")
        return bunsetsu_list

    def make_bunsetsu(self, bunsetsu_id: int, tokens: Sequence[Morpheme]) -> Bunsetsu:
        tokens = list(tokens)
        return Bunsetsu(
            id=bunsetsu_id,
            tokens=tokens,
            surface="".join(t.surface for t in tokens),
            head_index=self.find_head(tokens),
        )

    @staticmethod
    def find_head(tokens: Sequence[Morpheme]) -> int:
        """
        Index of the head morpheme: verb > adjective > noun > anything else.
        Ties keep the earliest; a run without any of the three keeps index 0.
        """
        head_index = 0
        max_priority = head_priority(tokens[0])

        for idx, token in enumerate(tokens):
            priority = head_priority(token)
            if priority > max_priority:
                head_index = idx
                max_priority = priority

        return head_index
