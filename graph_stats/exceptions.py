"""
Graph Statistics Exceptions

Custom exceptions raised while loading and analyzing edge-list graphs.
"""

from typing import Optional


class GraphStatsError(Exception):
    """Base class for graph statistics errors"""
    pass


class MalformedInputError(GraphStatsError):
    """An edge line holds a token that is not a non-negative integer"""

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        line: Optional[str] = None,
    ):
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class EmptyGraphError(GraphStatsError):
    """A statistic was requested over a graph with no nodes"""
    pass
