"""
Graph Statistics Analysis Module.

This module provides the adjacency store and the high-level analyzer, with a
pluggable backend architecture so the calculators only depend on the
GraphStore interface.
"""

from graph_stats.graph_analysis.base import (
    DegreeStats,
    Edge,
    EmptyGraphPolicy,
    Graph,
    GraphStore,
    NodeId,
    NodeUniverse,
)
from graph_stats.graph_analysis.networkx_backend import NetworkXGraphStore
from graph_stats.graph_analysis.analyzer import GraphAnalyzer

__all__ = [
    # Base classes and types
    "GraphStore",
    "Graph",
    "NodeId",
    "Edge",
    "DegreeStats",
    "NodeUniverse",
    "EmptyGraphPolicy",
    # Backend implementations
    "NetworkXGraphStore",
    # High-level interface
    "GraphAnalyzer",
]
