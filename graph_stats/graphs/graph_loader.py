"""
Edge-List Graph Loader

Reads plain-text edge lists into a GraphStore for analysis.
Supports:
- One edge per line, two whitespace-separated non-negative integers
- Gzip-compressed files (``.gz`` suffix)
- Any iterable of text lines (already opened files, in-memory lists)

Lines with a token count other than two are skipped. A two-token line whose
tokens are not integers aborts the whole load.
"""

import gzip
import re
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Iterable, Iterator, Optional, Tuple, Type, Union

from loguru import logger

from graph_stats.exceptions import MalformedInputError
from graph_stats.graph_analysis.base import Edge, GraphStore, NodeId, NodeUniverse
from graph_stats.graph_analysis.networkx_backend import NetworkXGraphStore

EdgeSource = Union[str, Path, Iterable[str]]

_NODE_ID_PATTERN = re.compile(r"\+?[0-9]+")


# =============================================================================
# CONFIGURATION
# =============================================================================


@dataclass
class LoaderConfig:
    """Configuration for edge-list loading."""

    # Store implementation to build
    backend_class: Type[GraphStore] = NetworkXGraphStore

    # Text encoding of edge-list files
    encoding: str = "utf-8"


# =============================================================================
# LINE PARSING
# =============================================================================


def parse_node_id(token: str) -> NodeId:
    """
    Parse a single node identifier.

    Only ASCII decimal digits with an optional leading ``+`` are accepted.

    Raises:
        ValueError: if the token is not a non-negative integer
    """
    if not _NODE_ID_PATTERN.fullmatch(token):
        raise ValueError(f"invalid node id {token!r}")
    return int(token)


def parse_edge_line(
    line: str,
    line_number: Optional[int] = None,
) -> Optional[Edge]:
    """
    Parse one edge-list line.

    Args:
        line: Raw text line
        line_number: 1-based position, reported in errors

    Returns:
        The parsed Edge, or None when the line does not hold exactly two tokens

    Raises:
        MalformedInputError: if a token is not a non-negative integer
    """
    parts = line.strip().split()
    if len(parts) != 2:
        return None

    try:
        return Edge(parse_node_id(parts[0]), parse_node_id(parts[1]))
    except ValueError as e:
        where = f"line {line_number}" if line_number is not None else "edge line"
        raise MalformedInputError(
            f"Malformed {where}: {e}",
            line_number=line_number,
            line=line.rstrip("\r\n"),
        ) from e


# =============================================================================
# GRAPH LOADER
# =============================================================================


class EdgeListLoader:
    """
    Builds a GraphStore from an edge list.

    The loader is stateless between calls: every ``load`` or ``build`` returns
    a fresh store.
    """

    def __init__(self, config: Optional[LoaderConfig] = None):
        self.config = config or LoaderConfig()

    def build(self, edges: Iterable[Tuple[NodeId, NodeId]]) -> GraphStore:
        """
        Build a store from ``(source, target)`` pairs.

        For each pair the source becomes a key node and the target joins its
        successor set. Parallel edges collapse.
        """
        store = self.config.backend_class()
        store.add_edges(edges)
        logger.debug(
            f"Built graph with {store.key_count} source nodes "
            f"and {store.edge_count} edges"
        )
        return store

    def iter_edges(self, lines: Iterable[str]) -> Iterator[Edge]:
        """
        Parse edges out of text lines, skipping lines that are not edges.

        Raises:
            MalformedInputError: on the first line with a non-integer token,
                or when the source cannot be decoded or is truncated
        """
        skipped = 0
        line_number = 0
        try:
            for line_number, line in enumerate(lines, start=1):
                edge = parse_edge_line(line, line_number)
                if edge is None:
                    skipped += 1
                    continue
                yield edge
        except (UnicodeDecodeError, EOFError) as e:
            # Text is decoded in chunks, so the failing line is approximate
            raise MalformedInputError(
                f"Unreadable input near line {line_number + 1}: {e}",
                line_number=line_number + 1,
            ) from e

        if skipped:
            logger.debug(f"Skipped {skipped} lines without exactly two tokens")

    def load(self, source: EdgeSource) -> GraphStore:
        """
        Load a graph from a file path or an iterable of lines.

        Args:
            source: Path to an edge-list file (``.gz`` is decompressed), or
                any iterable of text lines

        Returns:
            A populated GraphStore

        Raises:
            MalformedInputError: if any line has a non-integer token, the
                text is not valid in the configured encoding, or a gzip
                stream is truncated; no partial graph is returned
            OSError: if the file cannot be read
        """
        if isinstance(source, (str, Path)):
            path = Path(source)
            logger.info(f"Loading edge list from {path}")
            with self._open(path) as handle:
                store = self.build(self.iter_edges(handle))
        else:
            store = self.build(self.iter_edges(source))

        logger.info(
            f"Loaded graph with {store.node_count()} source nodes, "
            f"{store.node_count(NodeUniverse.ALL)} total nodes "
            f"and {store.edge_count} edges"
        )
        return store

    def _open(self, path: Path) -> IO[str]:
        if path.suffix == ".gz":
            return gzip.open(path, "rt", encoding=self.config.encoding)
        return open(path, "r", encoding=self.config.encoding)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def build(edges: Iterable[Tuple[NodeId, NodeId]]) -> GraphStore:
    """Convenience function for building a graph from edge pairs."""
    return EdgeListLoader().build(edges)


def load(source: EdgeSource) -> GraphStore:
    """Convenience function for loading a graph from an edge list."""
    return EdgeListLoader().load(source)
