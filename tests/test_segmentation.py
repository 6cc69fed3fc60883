import unittest
from kakariuke.segmentation import BunsetsuSegmenter
from tests.morphemes import m, TARO_SENTENCE, NOUN, VERB, ADJ, ADV, PARTICLE, AUX, SYMBOL


class TestBunsetsuSegmenter(unittest.TestCase):
    def setUp(self):
        self.segmenter = BunsetsuSegmenter()

    def test_case_particle_sentence(self):
        """
        太郎は / 花子に / プレゼントを / あげた。
        Function word followed by content word closes the run, the symbol closes the last one.
        """
        result = self.segmenter.segment(TARO_SENTENCE)
        self.assertEqual([b.surface for b in result], ["太郎は", "花子に", "プレゼントを", "あげた。"])
        self.assertEqual([b.id for b in result], [0, 1, 2, 3])

    def test_coverage(self):
        # Concatenated runs must give back the input exactly
        result = self.segmenter.segment(TARO_SENTENCE)
        flattened = [t for b in result for t in b.tokens]
        self.assertEqual(flattened, TARO_SENTENCE)

    def test_empty_input(self):
        self.assertEqual(self.segmenter.segment([]), [])

    def test_symbol_closes_run(self):
        tokens = [m("昨日", NOUN), m("、", SYMBOL, "読点"), m("雨", NOUN)]
        result = self.segmenter.segment(tokens)
        self.assertEqual([b.surface for b in result], ["昨日、", "雨"])

    def test_function_word_chain_stays_together(self):
        # た is followed by から (function word), so the run continues until 本
        tokens = [
            m("食べ", VERB, "自立", base="食べる"),
            m("た", AUX, base="た"),
            m("から", PARTICLE, "接続助詞"),
            m("本", NOUN),
        ]
        result = self.segmenter.segment(tokens)
        self.assertEqual([b.surface for b in result], ["食べたから", "本"])

    def test_content_words_are_not_split(self):
        tokens = [m("とても", ADV), m("美しい", ADJ, "自立"), m("花", NOUN), m("だ", AUX, base="だ")]
        result = self.segmenter.segment(tokens)
        self.assertEqual(len(result), 1)
        # adjective outranks noun and adverb
        self.assertEqual(result[0].head.surface, "美しい")
        self.assertEqual(result[0].head_index, 1)

    def test_trailing_function_word_closes_at_end(self):
        tokens = [m("本", NOUN), m("を", PARTICLE, "格助詞")]
        result = self.segmenter.segment(tokens)
        self.assertEqual([b.surface for b in result], ["本を"])

    def test_single_morpheme(self):
        result = self.segmenter.segment([m("はい", "感動詞")])
        self.assertEqual(len(result), 1)
        self.assertEqual(result[0].head_index, 0)


class TestFindHead(unittest.TestCase):
    def test_verb_beats_noun_in_any_order(self):
        noun, verb = m("勉強", NOUN, "サ変接続"), m("し", VERB, "自立", base="する")
        self.assertEqual(BunsetsuSegmenter.find_head([noun, verb]), 1)
        self.assertEqual(BunsetsuSegmenter.find_head([verb, noun]), 0)

    def test_particles_only_keeps_first(self):
        tokens = [m("に", PARTICLE), m("は", PARTICLE)]
        self.assertEqual(BunsetsuSegmenter.find_head(tokens), 0)

    def test_ties_keep_earliest(self):
        tokens = [m("東京", NOUN), m("大学", NOUN)]
        self.assertEqual(BunsetsuSegmenter.find_head(tokens), 0)

    def test_head_references_own_token(self):
        b = BunsetsuSegmenter().make_bunsetsu(0, [m("勉強", NOUN), m("し", VERB, "自立"), m("た", AUX)])
        self.assertIs(b.head, b.tokens[b.head_index])
        self.assertEqual(b.head.surface, "し")


if __name__ == '__main__':
    unittest.main()
