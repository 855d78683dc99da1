"""
High-level graph statistics interface.

This module provides the GraphAnalyzer class that:
- Loads an edge list once into a GraphStore
- Runs the centrality, path, degree and clustering calculators on it
- Collects the results into a GraphReport
"""

import time
from typing import Any, Dict, Iterable, List, Optional, Tuple

from loguru import logger

from graph_stats.exceptions import GraphStatsError
from graph_stats.graph_analysis.base import DegreeStats, GraphStore, NodeId
from graph_stats.graphs.graph_loader import EdgeListLoader, EdgeSource, LoaderConfig
from graph_stats.graphs.graph_metrics import (
    AnalysisConfig,
    CentralityCalculator,
    ClusteringCalculator,
    DegreeStatistics,
    PathFinder,
)
from graph_stats.report import GraphReport


class GraphAnalyzer:
    """
    High-level interface for graph statistics.

    Manages:
    - Loading the graph from an edge-list file or edge pairs
    - Running every calculator with a shared configuration
    - Building the report consumed by the CLI

    Example usage:
        analyzer = GraphAnalyzer()
        analyzer.load("p2p-Gnutella04.txt")

        in_scores = analyzer.in_degree_centrality()
        path = analyzer.shortest_path(4780, 5049)

        report = analyzer.analyze(source=4780, target=5049)
    """

    def __init__(
        self,
        config: Optional[AnalysisConfig] = None,
        loader_config: Optional[LoaderConfig] = None,
    ):
        """
        Initialize the GraphAnalyzer.

        Args:
            config: Settings shared by all calculators
            loader_config: Settings for reading edge lists
        """
        self.config = config or AnalysisConfig()
        self._loader = EdgeListLoader(loader_config)
        self._store: Optional[GraphStore] = None
        self._loaded_at: Optional[float] = None

        self._centrality = CentralityCalculator(self.config)
        self._paths = PathFinder(self.config)
        self._degrees = DegreeStatistics(self.config)
        self._clustering = ClusteringCalculator()

    @property
    def store(self) -> GraphStore:
        """Access the loaded graph store."""
        if self._store is None:
            raise GraphStatsError("No graph loaded; call load() or load_edges() first")
        return self._store

    @property
    def is_loaded(self) -> bool:
        """Check if a graph has been loaded."""
        return self._store is not None

    @property
    def node_count(self) -> int:
        """Number of nodes in the configured universe."""
        return self.store.node_count(self.config.universe)

    @property
    def edge_count(self) -> int:
        """Number of distinct edges."""
        return self.store.edge_count

    def load(self, source: EdgeSource) -> GraphStore:
        """
        Load the graph from an edge-list file or iterable of lines.

        Raises:
            MalformedInputError: if a line has a non-integer token
        """
        started = time.time()
        self._store = self._loader.load(source)
        self._loaded_at = time.time()
        logger.debug(f"Edge list loaded in {self._loaded_at - started:.3f}s")
        return self._store

    def load_edges(self, edges: Iterable[Tuple[NodeId, NodeId]]) -> GraphStore:
        """Build the graph from ``(source, target)`` pairs."""
        self._store = self._loader.build(edges)
        self._loaded_at = time.time()
        return self._store

    # Single statistics

    def in_degree_centrality(self) -> Dict[NodeId, float]:
        return self._centrality.in_degree_centrality(self.store)

    def out_degree_centrality(self) -> Dict[NodeId, float]:
        return self._centrality.out_degree_centrality(self.store)

    def shortest_path(self, start: NodeId, end: NodeId) -> Optional[List[NodeId]]:
        return self._paths.shortest_path(self.store, start, end)

    def mean_degree(self) -> float:
        return self._degrees.mean_degree(self.store)

    def degree_variance(self) -> float:
        return self._degrees.degree_variance(self.store)

    def degree_summary(self) -> DegreeStats:
        return self._degrees.summary(self.store)

    def global_clustering_coefficient(self) -> float:
        return self._clustering.global_clustering_coefficient(self.store)

    # Full run

    def analyze(
        self,
        source: Optional[NodeId] = None,
        target: Optional[NodeId] = None,
        top_k: Optional[int] = None,
    ) -> GraphReport:
        """
        Run every statistic on the loaded graph.

        Args:
            source: Start node of the path query (skipped unless both ends set)
            target: End node of the path query
            top_k: Entries per centrality ranking (default: config.top_k)

        Returns:
            GraphReport with all results

        Raises:
            EmptyGraphError: if the graph is empty and the policy is RAISE
        """
        store = self.store
        started = time.time()

        centralities = self._centrality.compute_all(store)
        degree_stats = self._degrees.summary(store)

        path = None
        if source is not None and target is not None:
            path = self._paths.shortest_path(store, source, target)

        report = GraphReport(
            node_count=store.node_count(self.config.universe),
            edge_count=store.edge_count,
            universe=self.config.universe,
            top_in_degree=self._centrality.top_nodes(centralities["in_degree"], top_k),
            top_out_degree=self._centrality.top_nodes(centralities["out_degree"], top_k),
            path_source=source,
            path_target=target,
            shortest_path=path,
            mean_degree=degree_stats.mean,
            degree_variance=degree_stats.variance,
            clustering_coefficient=self._clustering.global_clustering_coefficient(store),
        )

        logger.info(
            f"Analyzed {report.node_count} nodes and {report.edge_count} edges "
            f"in {time.time() - started:.3f}s"
        )
        return report

    def get_graph_stats(self) -> Dict[str, Any]:
        """Get statistics about the loaded graph."""
        if not self.is_loaded:
            return {"loaded": False}

        return {
            "loaded": True,
            "source_nodes": self.store.key_count,
            "edge_count": self.store.edge_count,
            "universe": self.config.universe.value,
            "loaded_at": self._loaded_at,
        }
