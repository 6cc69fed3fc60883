# kakariuke/core/data_structures.py
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional, List, Dict, Any

from .tagset import PartOfSpeech, PosDetail


class Morpheme(BaseModel):
    """
    One unit of morphological analysis, as delivered by the analyzer.
    Never mutated after construction.
    """
    model_config = ConfigDict(frozen=True)

    surface: str  # Literal text span
    pos: PartOfSpeech  # 名詞, 動詞, 助詞 ...
    pos_detail_1: PosDetail = PosDetail.NONE  # 自立, 格助詞 ...
    base_form: str  # Dictionary form
    reading: Optional[str] = None

    @field_validator("pos", mode="before")
    @classmethod
    def coerce_pos(cls, value):
        return PartOfSpeech.from_tag(value)

    @field_validator("pos_detail_1", mode="before")
    @classmethod
    def coerce_pos_detail(cls, value):
        return PosDetail.from_tag(value)


class Bunsetsu(BaseModel):
    """
    Contiguous run of morphemes forming one phrase unit.
    The head is kept as an index into `tokens`.
    """
    model_config = ConfigDict(frozen=True)

    id: int  # 0-based position in the bunsetsu list
    tokens: List[Morpheme]
    surface: str
    head_index: int = 0

    @model_validator(mode='after')
    def check_structure(self):
        if not self.tokens:
            raise ValueError(f"Bunsetsu {self.id} has no tokens")
        if not 0 <= self.head_index < len(self.tokens):
            raise ValueError(
                f"Bunsetsu {self.id}: head_index {self.head_index} out of range for {len(self.tokens)} tokens"
            )
        joined = "".join(t.surface for t in self.tokens)
        if joined != self.surface:
            raise ValueError(f"Bunsetsu {self.id}: surface '{self.surface}' != tokens '{joined}'")
        return self

    @property
    def head(self) -> Morpheme:
        return self.tokens[self.head_index]

    @property
    def last_token(self) -> Morpheme:
        return self.tokens[-1]


class DependencyEdge(BaseModel):
    """Edge from a dependent bunsetsu to its governor. Serialised as {from, to, label}."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_: int = Field(alias="from")
    to: int
    label: str = ""


class ParseResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = ""
    bunsetsu: List[Bunsetsu] = Field(default_factory=list)
    dependencies: List[DependencyEdge] = Field(default_factory=list)
    tokens: List[Morpheme] = Field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Output contract consumed by renderers and exporters."""
        return {
            "text": self.text,
            "bunsetsu": [
                {
                    "id": b.id,
                    "surface": b.surface,
                    "head": b.head_index,
                    "tokens": [t.model_dump(mode="json") for t in b.tokens],
                }
                for b in self.bunsetsu
            ],
            "dependencies": [d.model_dump(by_alias=True) for d in self.dependencies],
        }
