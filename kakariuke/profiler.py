import logging
from itertools import combinations

import networkx as nx
from typing import Sequence

from kakariuke.core.data_structures import DependencyEdge, ParseResult
from kakariuke.hierarchy import find_roots

logger = logging.getLogger(__name__)


class DependencyProfiler:
    """
    Structural statistics of one parse result.
    """

    def profile(self, result: ParseResult) -> dict:
        graph = self.to_graph(result)
        has_cycle = not nx.is_directed_acyclic_graph(graph)

        return {
            "text": result.text,
            "bunsetsu_count": len(result.bunsetsu),
            "edge_count": len(result.dependencies),
            "roots": find_roots(result.bunsetsu, result.dependencies),
            "tree_depth": -1 if has_cycle else self._calculate_tree_depth(graph),
            "has_cycle": has_cycle,
            "non_projective": self._is_non_projective(result.dependencies),
            "mean_dependency_distance": self._mean_distance(result.dependencies),
        }

    @staticmethod
    def to_graph(result: ParseResult) -> nx.DiGraph:
        """Head -> dependent arcs over bunsetsu ids."""
        g = nx.DiGraph()
        for b in result.bunsetsu:
            g.add_node(b.id)
        for dep in result.dependencies:
            g.add_edge(dep.to, dep.from_, label=dep.label)
        return g

    def _calculate_tree_depth(self, graph: nx.DiGraph) -> int:
        """
        Longest root-to-leaf path, counted in edges.
        """
        if graph.number_of_nodes() == 0:
            return 0
        return nx.dag_longest_path_length(graph)

    def _is_non_projective(self, dependencies: Sequence[DependencyEdge]) -> bool:
        """
        True if any two arcs cross when drawn above the sentence.
        """
        spans = [tuple(sorted((dep.from_, dep.to))) for dep in dependencies if dep.to != dep.from_]
        return any(
            s1 < s2 < e1 < e2 or s2 < s1 < e2 < e1
            for (s1, e1), (s2, e2) in combinations(spans, 2)
        )

    def _mean_distance(self, dependencies: Sequence[DependencyEdge]) -> float:
        if not dependencies:
            return 0.0
        return sum(abs(dep.to - dep.from_) for dep in dependencies) / len(dependencies)
