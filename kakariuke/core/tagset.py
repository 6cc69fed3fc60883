# kakariuke/core/tagset.py
from enum import Enum


class PartOfSpeech(str, Enum):
    """
    Top-level IPADIC part-of-speech tags (the first field of the analyzer's POS string).
    """
    NOUN = "名詞"
    VERB = "動詞"
    ADJECTIVE = "形容詞"
    ADVERB = "副詞"
    ADNOMINAL = "連体詞"
    INTERJECTION = "感動詞"
    PARTICLE = "助詞"
    AUXILIARY_VERB = "助動詞"
    CONJUNCTION = "接続詞"
    SYMBOL = "記号"
    PREFIX = "接頭詞"
    FILLER = "フィラー"
    OTHER = "その他"

    @classmethod
    def from_tag(cls, tag) -> "PartOfSpeech":
        if isinstance(tag, cls):
            return tag
        try:
            return cls(tag)
        except ValueError:
            return cls.OTHER


class PosDetail(str, Enum):
    """
    IPADIC sub-category tags (second field of the POS string).
    For verbs and adjectives this is the independence tag (自立 / 非自立 / 接尾).
    """
    NONE = "*"
    GENERAL = "一般"
    PROPER_NOUN = "固有名詞"
    PRONOUN = "代名詞"
    NUMBER = "数"
    SAHEN = "サ変接続"
    ADJECTIVAL_NOUN_STEM = "形容動詞語幹"
    NAI_ADJECTIVE_STEM = "ナイ形容詞語幹"
    ADVERBIAL_NOUN = "副詞可能"
    SUFFIX = "接尾"
    DEPENDENT = "非自立"
    INDEPENDENT = "自立"
    QUOTED_STRING = "引用文字列"
    SPECIAL = "特殊"
    VERBAL_DEPENDENT = "動詞非自立的"
    AUXILIARY_STEM = "助動詞語幹"
    CONJUNCTIVE = "接続詞的"
    CASE_PARTICLE = "格助詞"
    BINDING_PARTICLE = "係助詞"
    ADVERBIAL_PARTICLE = "副助詞"
    CONJUNCTIVE_PARTICLE = "接続助詞"
    SENTENCE_FINAL_PARTICLE = "終助詞"
    ADNOMINALIZER = "連体化"
    PARALLEL_PARTICLE = "並立助詞"
    ADVERBIALIZER = "副詞化"
    ADVERBIAL_PARALLEL_FINAL = "副助詞／並立助詞／終助詞"
    PERIOD = "句点"
    COMMA = "読点"
    SPACE = "空白"
    BRACKET_OPEN = "括弧開"
    BRACKET_CLOSE = "括弧閉"
    ALPHABET = "アルファベット"
    NOUN_CONNECTION = "名詞接続"
    VERB_CONNECTION = "動詞接続"
    NUMBER_CONNECTION = "数接続"
    ADJECTIVE_CONNECTION = "形容詞接続"
    PARTICLE_CONNECTION = "助詞類接続"
    OTHER = "その他"

    @classmethod
    def from_tag(cls, tag) -> "PosDetail":
        if isinstance(tag, cls):
            return tag
        if not tag:
            return cls.NONE
        try:
            return cls(tag)
        except ValueError:
            return cls.OTHER


CONTENT_POS = frozenset({
    PartOfSpeech.NOUN,
    PartOfSpeech.VERB,
    PartOfSpeech.ADJECTIVE,
    PartOfSpeech.ADVERB,
    PartOfSpeech.ADNOMINAL,
    PartOfSpeech.INTERJECTION,
})

FUNCTION_POS = frozenset({
    PartOfSpeech.PARTICLE,
    PartOfSpeech.AUXILIARY_VERB,
    PartOfSpeech.CONJUNCTION,
})

PREDICATE_POS = frozenset({PartOfSpeech.VERB, PartOfSpeech.ADJECTIVE})

# Head selection priority inside a bunsetsu; anything missing scores 0
HEAD_PRIORITY = {
    PartOfSpeech.VERB: 3,
    PartOfSpeech.ADJECTIVE: 2,
    PartOfSpeech.NOUN: 1,
}

# Conjunctive particles that link a clause to a later governing predicate
CLAUSE_CONNECTOR_PARTICLES = frozenset({
    "て", "で", "ば", "と", "ても", "でも", "から", "ので", "のに", "けど", "が",
})

# Auxiliary verbs (by base form) that close a clause
CLAUSE_CONNECTOR_AUXILIARIES = frozenset({"た", "だ", "です", "ます"})

CASE_PARTICLES = frozenset({
    "は", "が", "を", "に", "へ", "で", "から", "まで", "より", "と",
})

POSSESSIVE_PARTICLE = "の"

# Characters whose presence in a verb bunsetsu's last surface marks a continuative form
CONTINUATIVE_PATTERN = r"[てでたりながら]"


def is_content_word(morpheme) -> bool:
    return morpheme.pos in CONTENT_POS


def is_function_word(morpheme) -> bool:
    return morpheme.pos in FUNCTION_POS


def is_predicate(morpheme) -> bool:
    return morpheme.pos in PREDICATE_POS


def is_symbol(morpheme) -> bool:
    return morpheme.pos == PartOfSpeech.SYMBOL


def head_priority(morpheme) -> int:
    return HEAD_PRIORITY.get(morpheme.pos, 0)


def is_clause_connector(morpheme) -> bool:
    """
    Particle from the conjunctive set (matched on surface) or a clause-final
    auxiliary verb (matched on base form).
    """
    if morpheme.pos == PartOfSpeech.PARTICLE:
        return morpheme.surface in CLAUSE_CONNECTOR_PARTICLES
    if morpheme.pos == PartOfSpeech.AUXILIARY_VERB:
        return morpheme.base_form in CLAUSE_CONNECTOR_AUXILIARIES
    return False


def is_case_particle(morpheme) -> bool:
    return morpheme.pos == PartOfSpeech.PARTICLE and morpheme.surface in CASE_PARTICLES


def is_possessive_particle(morpheme) -> bool:
    return morpheme.pos == PartOfSpeech.PARTICLE and morpheme.surface == POSSESSIVE_PARTICLE
