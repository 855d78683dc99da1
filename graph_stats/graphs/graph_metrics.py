"""
Graph Statistics Algorithms

Structural statistics over a directed edge-list graph:
- In/out degree centrality, normalized by node count
- Unweighted shortest paths (breadth-first search)
- Mean and population variance of out-degree
- Global average local clustering coefficient

Every calculator is a read-only consumer of a GraphStore. Global statistics
range over the configured node universe, by default the nodes that have at
least one outgoing edge.
"""

from collections import deque
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np
from loguru import logger

from graph_stats.exceptions import EmptyGraphError
from graph_stats.graph_analysis.base import (
    DegreeStats,
    EmptyGraphPolicy,
    Graph,
    NodeId,
    NodeUniverse,
)


# =============================================================================
# CONFIGURATION
# =============================================================================


@dataclass
class AnalysisConfig:
    """Configuration for graph statistics."""

    # Node set for centrality and degree statistics
    universe: NodeUniverse = NodeUniverse.SOURCES

    # Behavior when the node set is empty
    empty_graph_policy: EmptyGraphPolicy = EmptyGraphPolicy.RAISE

    # Visit successors in ascending id order during path search
    sorted_successors: bool = False

    # Number of entries reported per centrality ranking
    top_k: int = 5

    def __post_init__(self):
        """Validate configuration values."""
        self.universe = NodeUniverse(self.universe)
        self.empty_graph_policy = EmptyGraphPolicy(self.empty_graph_policy)
        if self.top_k < 1:
            raise ValueError("top_k must be at least 1")


def _node_universe(
    graph: Graph,
    config: AnalysisConfig,
    statistic: str,
) -> List[NodeId]:
    """
    Return the nodes a statistic ranges over.

    An empty list is only returned under the NaN policy.

    Raises:
        EmptyGraphError: if the universe is empty and the policy is RAISE
    """
    nodes = graph.nodes(config.universe)
    if not nodes:
        if config.empty_graph_policy == EmptyGraphPolicy.RAISE:
            raise EmptyGraphError(
                f"Cannot compute {statistic}: graph has no "
                f"{config.universe.value} nodes"
            )
        logger.warning(f"{statistic} is undefined on an empty graph")
    return nodes


# =============================================================================
# CENTRALITY CALCULATIONS
# =============================================================================


class CentralityCalculator:
    """
    Computes normalized degree centrality for every node.

    Scores are raw degrees divided by the size of the node universe, so
    out-degree centrality can exceed 1 when a node links to sinks.
    """

    def __init__(self, config: Optional[AnalysisConfig] = None):
        self.config = config or AnalysisConfig()

    def in_degree_centrality(self, graph: Graph) -> Dict[NodeId, float]:
        """
        Compute in-degree centrality.

        In-degree counts the source nodes whose successors contain the node.
        """
        nodes = _node_universe(graph, self.config, "in-degree centrality")
        total = len(nodes)
        return {node: graph.in_degree(node) / total for node in nodes}

    def out_degree_centrality(self, graph: Graph) -> Dict[NodeId, float]:
        """Compute out-degree centrality (distinct successors per node)."""
        nodes = _node_universe(graph, self.config, "out-degree centrality")
        total = len(nodes)
        return {node: graph.out_degree(node) / total for node in nodes}

    def top_nodes(
        self,
        scores: Dict[NodeId, float],
        k: Optional[int] = None,
    ) -> List[Tuple[NodeId, float]]:
        """
        Get top-k nodes by score.

        Returns:
            List of (node_id, score) tuples, highest score first, ties in
            ascending node id order
        """
        if k is None:
            k = self.config.top_k
        ranked = sorted(scores.items(), key=lambda x: (-x[1], x[0]))
        return ranked[:k]

    def compute_all(self, graph: Graph) -> Dict[str, Dict[NodeId, float]]:
        """
        Compute both centrality measures.

        Returns:
            Dict with keys 'in_degree' and 'out_degree'
        """
        return {
            "in_degree": self.in_degree_centrality(graph),
            "out_degree": self.out_degree_centrality(graph),
        }


# =============================================================================
# PATH FINDING
# =============================================================================


class PathFinder:
    """
    Unweighted shortest paths over directed edges.

    The search keeps a predecessor map instead of copying partial paths; a
    node's predecessor is fixed the first time it is discovered, so among
    several shortest paths the one found first in successor order wins.
    """

    def __init__(self, config: Optional[AnalysisConfig] = None):
        self.config = config or AnalysisConfig()

    def _successors(self, graph: Graph, node: NodeId) -> Iterator[NodeId]:
        if self.config.sorted_successors:
            return iter(sorted(graph.successors(node)))
        return graph.successors(node)

    def shortest_path(
        self,
        graph: Graph,
        start: NodeId,
        end: NodeId,
    ) -> Optional[List[NodeId]]:
        """
        Find a shortest path between two nodes.

        Args:
            graph: The graph
            start: Source node ID
            end: Target node ID

        Returns:
            List of node IDs from start to end, or None if end is unreachable
        """
        if start == end:
            return [start]

        predecessors: Dict[NodeId, Optional[NodeId]] = {start: None}
        frontier = deque([start])

        while frontier:
            node = frontier.popleft()
            for neighbor in self._successors(graph, node):
                if neighbor in predecessors:
                    continue
                predecessors[neighbor] = node
                if neighbor == end:
                    path = self._reconstruct(predecessors, end)
                    logger.debug(
                        f"Path {start} -> {end} found with {len(path) - 1} hops "
                        f"after discovering {len(predecessors)} nodes"
                    )
                    return path
                frontier.append(neighbor)

        logger.debug(f"No path {start} -> {end} ({len(predecessors)} nodes reached)")
        return None

    def path_length(self, graph: Graph, start: NodeId, end: NodeId) -> Optional[int]:
        """Number of edges on a shortest path, or None if unreachable."""
        path = self.shortest_path(graph, start, end)
        return len(path) - 1 if path is not None else None

    @staticmethod
    def _reconstruct(
        predecessors: Dict[NodeId, Optional[NodeId]],
        end: NodeId,
    ) -> List[NodeId]:
        path = [end]
        node = predecessors[end]
        while node is not None:
            path.append(node)
            node = predecessors[node]
        path.reverse()
        return path


# =============================================================================
# DEGREE STATISTICS
# =============================================================================


class DegreeStatistics:
    """Mean and population variance of the out-degree distribution."""

    def __init__(self, config: Optional[AnalysisConfig] = None):
        self.config = config or AnalysisConfig()

    def _out_degrees(self, graph: Graph, statistic: str) -> np.ndarray:
        nodes = _node_universe(graph, self.config, statistic)
        return np.fromiter(
            (graph.out_degree(node) for node in nodes),
            dtype=np.int64,
            count=len(nodes),
        )

    def mean_degree(self, graph: Graph) -> float:
        """Average out-degree."""
        degrees = self._out_degrees(graph, "mean degree")
        if degrees.size == 0:
            return float("nan")
        return float(degrees.mean())

    def degree_variance(self, graph: Graph) -> float:
        """Population variance of out-degree (denominator N)."""
        degrees = self._out_degrees(graph, "degree variance")
        if degrees.size == 0:
            return float("nan")
        return float(np.var(degrees))

    def summary(self, graph: Graph) -> DegreeStats:
        """Compute all out-degree statistics in one pass."""
        degrees = self._out_degrees(graph, "degree summary")
        if degrees.size == 0:
            nan = float("nan")
            return DegreeStats(0, graph.edge_count, nan, nan, 0, 0)

        return DegreeStats(
            node_count=int(degrees.size),
            edge_count=graph.edge_count,
            mean=float(degrees.mean()),
            variance=float(np.var(degrees)),
            min_degree=int(degrees.min()),
            max_degree=int(degrees.max()),
        )


# =============================================================================
# CLUSTERING
# =============================================================================


class ClusteringCalculator:
    """
    Directed local and global clustering coefficients.

    For a node with successor set S, the local coefficient is the share of
    ordered pairs (a, b) of distinct members of S joined by an edge a -> b,
    out of |S|·(|S|−1). Only nodes with out-degree ≥ 2 take part in the
    global average.
    """

    def local_clustering(self, graph: Graph, node: NodeId) -> float:
        """Local clustering coefficient of one node, 0.0 below out-degree 2."""
        neighbors = list(graph.successors(node))
        k = len(neighbors)
        if k < 2:
            return 0.0

        members = set(neighbors)
        links = 0
        for a in neighbors:
            for b in graph.successors(a):
                if b != a and b in members:
                    links += 1

        return links / (k * (k - 1))

    def global_clustering_coefficient(self, graph: Graph) -> float:
        """
        Average local coefficient over nodes with out-degree ≥ 2.

        Returns 0.0 when no node qualifies, including the empty graph.
        """
        total = 0.0
        counted = 0

        for node in graph.keys():
            if graph.out_degree(node) < 2:
                continue
            total += self.local_clustering(graph, node)
            counted += 1

        logger.debug(f"Clustering averaged over {counted} nodes")
        if counted == 0:
            return 0.0
        return total / counted


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def in_degree_centrality(graph: Graph) -> Dict[NodeId, float]:
    """Convenience function for in-degree centrality."""
    return CentralityCalculator().in_degree_centrality(graph)


def out_degree_centrality(graph: Graph) -> Dict[NodeId, float]:
    """Convenience function for out-degree centrality."""
    return CentralityCalculator().out_degree_centrality(graph)


def shortest_path(
    graph: Graph,
    start: NodeId,
    end: NodeId,
) -> Optional[List[NodeId]]:
    """Convenience function for shortest path."""
    return PathFinder().shortest_path(graph, start, end)


def mean_degree(graph: Graph) -> float:
    """Convenience function for mean out-degree."""
    return DegreeStatistics().mean_degree(graph)


def degree_variance(graph: Graph) -> float:
    """Convenience function for out-degree variance."""
    return DegreeStatistics().degree_variance(graph)


def global_clustering_coefficient(graph: Graph) -> float:
    """Convenience function for the global clustering coefficient."""
    return ClusteringCalculator().global_clustering_coefficient(graph)
