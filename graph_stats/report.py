"""
Report model for a full graph statistics run.

The analytic layer returns plain dicts, lists and floats; this module gathers
them into one pydantic model that the CLI prints as text or JSON.
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from graph_stats.graph_analysis.base import NodeId, NodeUniverse


class GraphReport(BaseModel):
    """All statistics computed for one graph."""

    node_count: int = Field(..., description="Nodes in the analyzed universe")
    edge_count: int = Field(..., description="Distinct directed edges")
    universe: NodeUniverse = Field(
        NodeUniverse.SOURCES, description="Node set the statistics range over"
    )

    top_in_degree: List[Tuple[NodeId, float]] = Field(
        default_factory=list, description="Highest in-degree centrality scores"
    )
    top_out_degree: List[Tuple[NodeId, float]] = Field(
        default_factory=list, description="Highest out-degree centrality scores"
    )

    path_source: Optional[NodeId] = None
    path_target: Optional[NodeId] = None
    shortest_path: Optional[List[NodeId]] = Field(
        None, description="Shortest path between path_source and path_target"
    )

    mean_degree: float
    degree_variance: float
    clustering_coefficient: float

    @property
    def has_path_query(self) -> bool:
        return self.path_source is not None and self.path_target is not None


def render_text(report: GraphReport) -> str:
    """Format a report as the human-readable summary printed by the CLI."""
    lines = [
        f"Nodes: {report.node_count} ({report.universe.value})",
        f"Edges: {report.edge_count}",
        f"In-Degree Centrality (Top {len(report.top_in_degree)}):",
    ]
    lines.extend(f"  {node}: {score:.6f}" for node, score in report.top_in_degree)
    lines.append(f"Out-Degree Centrality (Top {len(report.top_out_degree)}):")
    lines.extend(f"  {node}: {score:.6f}" for node, score in report.top_out_degree)

    if report.has_path_query:
        if report.shortest_path is not None:
            lines.append(
                f"Shortest Path between nodes {report.path_source} and "
                f"{report.path_target}: {report.shortest_path}"
            )
        else:
            lines.append(
                f"No path between nodes {report.path_source} and "
                f"{report.path_target}."
            )

    lines.append(f"Mean Degree: {report.mean_degree:.2f}")
    lines.append(f"Variance of Degree: {report.degree_variance:.2f}")
    lines.append(f"Global Clustering Coefficient: {report.clustering_coefficient:.4f}")
    return "\n".join(lines)
