import io
import json
import logging
from pathlib import Path
from typing import Optional, Union

import networkx as nx
from conllu.models import Token, TokenList

from kakariuke.core.data_structures import ParseResult

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("json", "graphml", "conllu")


def to_graph(result: ParseResult) -> nx.DiGraph:
    """
    Node/edge graph of the result: one node per bunsetsu keyed by id,
    one directed edge per dependency (dependent -> governor).
    """
    g = nx.DiGraph()
    for b in result.bunsetsu:
        g.add_node(b.id, label=b.surface, head=b.head.surface)
    for dep in result.dependencies:
        g.add_edge(dep.from_, dep.to, label=dep.label)
    return g


def to_graphml(result: ParseResult) -> str:
    # Written as UTF-8 bytes so Japanese text is kept literal; &, < and > are still escaped
    buf = io.BytesIO()
    nx.write_graphml(to_graph(result), buf, encoding="utf-8", prettyprint=True)
    return buf.getvalue().decode("utf-8")


def to_conllu(result: ParseResult, sent_id: Optional[str] = None) -> str:
    """
    CoNLL-U with bunsetsu as units: ID/HEAD are 1-based, the final bunsetsu is the root.
    """
    targets = {dep.from_: dep for dep in result.dependencies}

    tokens = []
    for b in result.bunsetsu:
        dep = targets.get(b.id)
        tokens.append(Token({
            "id": b.id + 1,
            "form": b.surface,
            "lemma": b.head.base_form,
            "upos": None,
            "xpos": b.head.pos.value,
            "feats": None,
            "head": dep.to + 1 if dep is not None else 0,
            "deprel": (dep.label or "dep") if dep is not None else "root",
            "deps": None,
            "misc": {"Head": b.head.surface},
        }))

    metadata = {}
    if sent_id is not None:
        metadata["sent_id"] = sent_id
    metadata["text"] = result.text

    return TokenList(tokens, metadata=metadata).serialize()


def to_json(result: ParseResult) -> str:
    return json.dumps(result.to_dict(), ensure_ascii=False, indent=2)


def export(result: ParseResult, fmt: str = "json") -> str:
    if fmt == "json":
        return to_json(result)
    if fmt == "graphml":
        return to_graphml(result)
    if fmt == "conllu":
        return to_conllu(result)
    raise ValueError(f"Unknown export format: {fmt} (expected one of {', '.join(EXPORT_FORMATS)})")


def write_export(result: ParseResult, path: Union[str, Path], fmt: str = "json") -> Path:
    path = Path(path)
    content = export(result, fmt)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.info(f"Exported {len(result.bunsetsu)} bunsetsu as {fmt} to {path}")
    return path
