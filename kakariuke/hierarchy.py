import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Sequence, Tuple

from kakariuke.core.data_structures import Bunsetsu, DependencyEdge

logger = logging.getLogger(__name__)

VIRTUAL_ROOT_ID = -1
VIRTUAL_ROOT_SURFACE = "ROOT"


@dataclass(eq=False)
class TreeNode:
    """
    Node of the display tree handed to renderers.
    `label` is the label of the edge to this node's parent.
    Trees can be as deep as the sentence is long, so traversal is iterative.
    """
    id: int
    surface: str
    label: str = ""
    children: List["TreeNode"] = field(default_factory=list, repr=False)

    @property
    def is_virtual(self) -> bool:
        return self.id == VIRTUAL_ROOT_ID

    def to_dict(self) -> dict:
        root = {"id": self.id, "surface": self.surface, "label": self.label, "children": []}
        stack = [(self, root)]
        while stack:
            node, out = stack.pop()
            for child in node.children:
                child_out = {"id": child.id, "surface": child.surface, "label": child.label, "children": []}
                out["children"].append(child_out)
                stack.append((child, child_out))
        return root

    def walk(self):
        """Pre-order traversal."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


def find_roots(bunsetsu: Sequence[Bunsetsu], dependencies: Sequence[DependencyEdge]) -> List[int]:
    """Bunsetsu ids without an outgoing edge."""
    has_parent = {dep.from_ for dep in dependencies}
    return [b.id for b in bunsetsu if b.id not in has_parent]


def build_hierarchy(
    bunsetsu: Sequence[Bunsetsu],
    dependencies: Sequence[DependencyEdge],
) -> Optional[TreeNode]:
    """
    Turns the edge list into a single tree: dependents become children of their targets.

    * several roots: wrapped in a virtual ROOT node (id -1)
    * no root at all (every node has a parent, i.e. a cycle): start from bunsetsu 0
    * cycles: a node already on the current path is not expanded again
    """
    if not bunsetsu:
        return None

    surfaces = {b.id: b.surface for b in bunsetsu}
    children: Dict[int, List[DependencyEdge]] = {b.id: [] for b in bunsetsu}
    for dep in dependencies:
        children.setdefault(dep.to, []).append(dep)

    def expand(root_id: int) -> TreeNode:
        root = TreeNode(id=root_id, surface=surfaces.get(root_id, ""))
        stack: List[Tuple[TreeNode, FrozenSet[int]]] = [(root, frozenset({root_id}))]

        while stack:
            node, path = stack.pop()
            for dep in children.get(node.id, []):
                if dep.from_ in path:
                    logger.debug(f"Cycle at {dep.from_}->{node.id}, not expanding")
                    continue
                child = TreeNode(id=dep.from_, surface=surfaces.get(dep.from_, ""), label=dep.label)
                node.children.append(child)
                stack.append((child, path | {dep.from_}))

        return root

    roots = find_roots(bunsetsu, dependencies)

    if len(roots) > 1:
        virtual = TreeNode(id=VIRTUAL_ROOT_ID, surface=VIRTUAL_ROOT_SURFACE)
        virtual.children = [expand(root) for root in roots]
        return virtual
    elif len(roots) == 1:
        return expand(roots[0])
    else:
        logger.warning("No root bunsetsu found, falling back to the first one")
        return expand(bunsetsu[0].id)
