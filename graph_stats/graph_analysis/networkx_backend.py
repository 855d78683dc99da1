"""
NetworkX implementation of the GraphStore interface.

The adjacency lives in an ``nx.DiGraph``, which already collapses parallel
edges and keeps insertion order for nodes and successors. The store adds the
source-node bookkeeping the statistics depend on: NetworkX registers both
endpoints of an edge as nodes, while only sources count as keys here.
"""

from typing import Dict, Iterator, List, Set

import networkx as nx

from graph_stats.graph_analysis.base import GraphStore, NodeId, NodeUniverse


class NetworkXGraphStore(GraphStore):
    """NetworkX implementation of GraphStore."""

    def __init__(self):
        self._graph: nx.DiGraph = nx.DiGraph()
        self._keys: Dict[NodeId, None] = {}  # ordered set of source nodes

    def add_edge(self, source: NodeId, target: NodeId) -> None:
        """Add a single directed edge."""
        self._keys.setdefault(source, None)
        self._graph.add_edge(source, target)

    def has_key(self, node_id: NodeId) -> bool:
        return node_id in self._keys

    def keys(self) -> List[NodeId]:
        return list(self._keys)

    def nodes(self, universe: NodeUniverse = NodeUniverse.SOURCES) -> List[NodeId]:
        """Return the nodes of a universe."""
        if universe == NodeUniverse.SOURCES:
            return self.keys()
        elif universe == NodeUniverse.ALL:
            return list(self._graph.nodes())
        else:
            raise ValueError(f"Unknown node universe: {universe}")

    def successors(self, node_id: NodeId) -> Iterator[NodeId]:
        if node_id not in self._keys:
            return iter(())
        return iter(self._graph.successors(node_id))

    def in_degree(self, node_id: NodeId) -> int:
        # Every predecessor is a key, so the NetworkX in-degree matches
        return self._graph.in_degree(node_id) if node_id in self._graph else 0

    def out_degree(self, node_id: NodeId) -> int:
        return self._graph.out_degree(node_id) if node_id in self._graph else 0

    def has_edge(self, source: NodeId, target: NodeId) -> bool:
        return self._graph.has_edge(source, target)

    @property
    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    @property
    def key_count(self) -> int:
        return len(self._keys)

    def node_count(self, universe: NodeUniverse = NodeUniverse.SOURCES) -> int:
        if universe == NodeUniverse.SOURCES:
            return len(self._keys)
        return self._graph.number_of_nodes()

    # NetworkX-specific convenience methods

    @property
    def graph(self) -> nx.DiGraph:
        """Direct access to the underlying NetworkX graph (treat as read-only)."""
        return self._graph

    def to_adjacency(self) -> Dict[NodeId, Set[NodeId]]:
        """Return the key-node adjacency as a plain ``{node: successors}`` dict."""
        return {node: set(self._graph.successors(node)) for node in self._keys}

    def __repr__(self) -> str:
        return (
            f"NetworkXGraphStore(keys={len(self._keys)}, "
            f"nodes={self._graph.number_of_nodes()}, "
            f"edges={self._graph.number_of_edges()})"
        )
