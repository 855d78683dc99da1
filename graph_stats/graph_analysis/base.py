"""
Abstract base classes for graph store backends.

This module defines the interface every adjacency store must implement, so
the analytic calculators never depend on a specific graph library. The
NetworkX store is the only implementation today.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Tuple

NodeId = int


class NodeUniverse(str, Enum):
    """Which nodes a global statistic ranges over."""

    SOURCES = "sources"  # nodes with at least one outgoing edge
    ALL = "all"  # sources and destinations


class EmptyGraphPolicy(str, Enum):
    """What a statistic does when its node universe is empty."""

    RAISE = "raise"
    NAN = "nan"


@dataclass(frozen=True)
class Edge:
    """A directed edge read from an edge list."""

    source: NodeId
    target: NodeId

    def __iter__(self) -> Iterator[NodeId]:
        # Unpacks like a (source, target) pair
        return iter((self.source, self.target))


@dataclass
class DegreeStats:
    """Summary of the out-degree distribution."""

    node_count: int
    edge_count: int
    mean: float
    variance: float
    min_degree: int
    max_degree: int


class GraphStore(ABC):
    """
    Abstract base class for directed adjacency stores.

    Implementations: NetworkXGraphStore

    A node is a *key* once it has been seen as the source of an edge. Nodes
    only ever seen as destinations are sinks: they show up as successors but
    are not keys. Stores are filled once and read-only afterwards.
    """

    @abstractmethod
    def add_edge(self, source: NodeId, target: NodeId) -> None:
        """Register ``source`` as a key and add ``target`` to its successors."""
        pass

    def add_edges(self, edges: Iterable[Tuple[NodeId, NodeId]]) -> None:
        """Stream a sequence of ``(source, target)`` pairs into the store."""
        for source, target in edges:
            self.add_edge(source, target)

    @abstractmethod
    def has_key(self, node_id: NodeId) -> bool:
        """Check whether a node has at least one outgoing edge."""
        pass

    @abstractmethod
    def keys(self) -> List[NodeId]:
        """Return all key nodes in insertion order."""
        pass

    @abstractmethod
    def nodes(self, universe: NodeUniverse = NodeUniverse.SOURCES) -> List[NodeId]:
        """Return the nodes of the requested universe in insertion order."""
        pass

    @abstractmethod
    def successors(self, node_id: NodeId) -> Iterator[NodeId]:
        """
        Iterate the direct successors of a node.

        Yields nothing for a node that is not a key.
        """
        pass

    @abstractmethod
    def in_degree(self, node_id: NodeId) -> int:
        """Number of key nodes whose successors contain ``node_id``."""
        pass

    @abstractmethod
    def out_degree(self, node_id: NodeId) -> int:
        """Number of distinct successors of ``node_id``."""
        pass

    @abstractmethod
    def has_edge(self, source: NodeId, target: NodeId) -> bool:
        """Check whether the directed edge exists."""
        pass

    @property
    @abstractmethod
    def edge_count(self) -> int:
        """Number of distinct directed edges, self-loops included."""
        pass

    @property
    def key_count(self) -> int:
        """Number of key nodes."""
        return len(self.keys())

    def node_count(self, universe: NodeUniverse = NodeUniverse.SOURCES) -> int:
        """Number of nodes in the requested universe."""
        return len(self.nodes(universe))

    def __len__(self) -> int:
        return self.key_count

    def __contains__(self, node_id: object) -> bool:
        return isinstance(node_id, int) and self.has_key(node_id)


# Analytic code is written against the store interface
Graph = GraphStore
