import unittest
from pydantic import ValidationError
from kakariuke.core.data_structures import Bunsetsu, DependencyEdge, Morpheme
from kakariuke.core.tagset import (
    PartOfSpeech, PosDetail, is_clause_connector, is_content_word, is_function_word,
)
from tests.morphemes import m, NOUN, PARTICLE, AUX


class TestMorpheme(unittest.TestCase):
    def test_tags_are_coerced(self):
        token = Morpheme(surface="猫", pos="名詞", pos_detail_1="一般", base_form="猫")
        self.assertIs(token.pos, PartOfSpeech.NOUN)
        self.assertIs(token.pos_detail_1, PosDetail.GENERAL)

    def test_unknown_tags(self):
        token = Morpheme(surface="x", pos="謎", pos_detail_1="謎謎", base_form="x")
        self.assertIs(token.pos, PartOfSpeech.OTHER)
        self.assertIs(token.pos_detail_1, PosDetail.OTHER)

    def test_immutable(self):
        token = m("猫", NOUN)
        with self.assertRaises(ValidationError):
            token.surface = "犬"


class TestBunsetsu(unittest.TestCase):
    def test_head_index_out_of_range(self):
        with self.assertRaises(ValidationError):
            Bunsetsu(id=0, tokens=[m("猫", NOUN)], surface="猫", head_index=1)

    def test_surface_must_match_tokens(self):
        with self.assertRaises(ValidationError):
            Bunsetsu(id=0, tokens=[m("猫", NOUN), m("が", PARTICLE)], surface="猫")

    def test_empty_tokens(self):
        with self.assertRaises(ValidationError):
            Bunsetsu(id=0, tokens=[], surface="")


class TestDependencyEdge(unittest.TestCase):
    def test_alias(self):
        edge = DependencyEdge(**{"from": 0, "to": 2, "label": "が"})
        self.assertEqual(edge.from_, 0)
        self.assertEqual(edge.model_dump(by_alias=True), {"from": 0, "to": 2, "label": "が"})


class TestTagset(unittest.TestCase):
    def test_word_classes(self):
        self.assertTrue(is_content_word(m("とても", "副詞")))
        self.assertTrue(is_function_word(m("しかし", "接続詞")))
        self.assertFalse(is_content_word(m("。", "記号")))
        self.assertFalse(is_function_word(m("。", "記号")))

    def test_clause_connector(self):
        self.assertTrue(is_clause_connector(m("ので", PARTICLE, "接続助詞")))
        self.assertTrue(is_clause_connector(m("まし", AUX, base="ます")))
        self.assertFalse(is_clause_connector(m("ない", AUX, base="ない")))
        self.assertFalse(is_clause_connector(m("を", PARTICLE, "格助詞")))
        self.assertFalse(is_clause_connector(m("て", NOUN)))


if __name__ == '__main__':
    unittest.main()
