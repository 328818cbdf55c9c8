"""
Topology Helpers
================

Structural views over a citation graph, backed by NetworkX.

ALLOWED:
- Neighbourhood lookup for selection highlighting
- Counts, density, connected components

FORBIDDEN:
- Centrality or ranking (influence is fixed at build time)
- Community detection (clusters come from the topic table only)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Optional, Set
import networkx as nx

from ..contracts.graph import CitationGraph


@dataclass(frozen=True)
class GraphMetrics:
    """Immutable structural metrics for a citation graph."""
    node_count: int
    edge_count: int
    density: float
    connected_components_count: int
    cluster_sizes: Dict[str, int] = field(default_factory=dict)


def to_networkx(graph: CitationGraph) -> nx.Graph:
    """Undirected NetworkX copy; edges to unknown nodes are skipped."""
    g = nx.Graph()
    for node in graph.nodes.values():
        g.add_node(
            node.id,
            title=node.title,
            topic=node.topic,
            influence=node.influence,
        )
    for edge in graph.edges:
        if edge.source in graph.nodes and edge.target in graph.nodes:
            g.add_edge(
                edge.source,
                edge.target,
                strength=edge.strength,
                kind=edge.kind.value,
            )
    return g


def connected_nodes(graph: CitationGraph, node_id: Optional[str]) -> Set[str]:
    """
    The active node plus its direct neighbours in ``graph``.

    Pass the filtered graph to highlight only visible connections.
    """
    if node_id is None or node_id not in graph.nodes:
        return set()
    g = to_networkx(graph)
    return {node_id, *g.neighbors(node_id)}


def compute_metrics(graph: CitationGraph) -> GraphMetrics:
    g = to_networkx(graph)
    cluster_sizes = {topic: len(ids) for topic, ids in graph.clusters.items() if ids}
    if not g:
        return GraphMetrics(0, 0, 0.0, 0, cluster_sizes)

    return GraphMetrics(
        node_count=g.number_of_nodes(),
        edge_count=g.number_of_edges(),
        density=nx.density(g),
        connected_components_count=nx.number_connected_components(g),
        cluster_sizes=cluster_sizes,
    )
