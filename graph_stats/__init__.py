"""
Structural statistics over directed edge-list graphs.

Degree centrality, shortest paths, out-degree dispersion and clustering,
computed over an in-memory adjacency store loaded once from a text file.
"""

# graph_analysis must be imported before graphs
from graph_stats.graph_analysis import (
    DegreeStats,
    Edge,
    EmptyGraphPolicy,
    Graph,
    GraphAnalyzer,
    GraphStore,
    NetworkXGraphStore,
    NodeId,
    NodeUniverse,
)
from graph_stats.exceptions import EmptyGraphError, GraphStatsError, MalformedInputError
from graph_stats.graphs.graph_loader import EdgeListLoader, LoaderConfig, build, load
from graph_stats.graphs.graph_metrics import (
    AnalysisConfig,
    CentralityCalculator,
    ClusteringCalculator,
    DegreeStatistics,
    PathFinder,
    degree_variance,
    global_clustering_coefficient,
    in_degree_centrality,
    mean_degree,
    out_degree_centrality,
    shortest_path,
)
from graph_stats.report import GraphReport, render_text

__version__ = "0.1.0"

__all__ = [
    # Graph store
    "Graph",
    "GraphStore",
    "NetworkXGraphStore",
    "NodeId",
    "Edge",
    "NodeUniverse",
    "EmptyGraphPolicy",
    "DegreeStats",
    # Loading
    "EdgeListLoader",
    "LoaderConfig",
    "build",
    "load",
    # Calculators
    "AnalysisConfig",
    "CentralityCalculator",
    "PathFinder",
    "DegreeStatistics",
    "ClusteringCalculator",
    "in_degree_centrality",
    "out_degree_centrality",
    "shortest_path",
    "mean_degree",
    "degree_variance",
    "global_clustering_coefficient",
    # High-level interface
    "GraphAnalyzer",
    "GraphReport",
    "render_text",
    # Errors
    "GraphStatsError",
    "MalformedInputError",
    "EmptyGraphError",
]
