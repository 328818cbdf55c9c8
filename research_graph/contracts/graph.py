"""
Citation Graph Contracts

The in-memory graph passed between the builder, the layout engine and
the filter engine.

OWNERSHIP:
==========
- The builder creates every ResearchNode and CitationEdge
- The layout engine writes ONLY x/y on existing nodes
- The filter engine builds new containers that reference the SAME node
  objects; it never clones or mutates them
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .errors import BuildIssue, GraphContractError


# =============================================================================
# NODES
# =============================================================================

@dataclass(eq=False)
class ResearchNode:
    """
    One publication or static paper.

    radius, color and influence are fixed at build time. x/y stay at 0,0
    until the layout engine runs.
    """
    id: str
    title: str
    authors: Tuple[str, ...]
    year: str
    topic: str
    color: str
    influence: float
    radius: float
    venue: Optional[str] = None
    citations: int = 0
    abstract: Optional[str] = None
    pdf_url: Optional[str] = None
    source: str = "manual"
    x: float = 0.0
    y: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'title': self.title,
            'authors': list(self.authors),
            'year': self.year,
            'venue': self.venue,
            'citations': self.citations,
            'abstract': self.abstract,
            'pdfUrl': self.pdf_url,
            'source': self.source,
            'topic': self.topic,
            'x': self.x,
            'y': self.y,
            'radius': self.radius,
            'color': self.color,
            'influence': self.influence,
        }


# =============================================================================
# EDGES
# =============================================================================

class EdgeKind(Enum):
    """Heuristic that inferred an edge, in priority order."""
    AUTHOR = "author"
    VENUE = "venue"
    TOPIC = "topic"


@dataclass(frozen=True)
class CitationEdge:
    """Inferred, undirected relationship between two nodes."""
    source: str
    target: str
    strength: float
    kind: EdgeKind
    bidirectional: bool = True

    def __post_init__(self):
        if self.source == self.target:
            raise GraphContractError(f"Self-loop on node {self.source!r}")
        if not 0.0 < self.strength <= 1.0:
            raise GraphContractError(
                f"Edge strength must be in (0, 1], got {self.strength}"
            )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'source': self.source,
            'target': self.target,
            'strength': self.strength,
            'bidirectional': self.bidirectional,
            'kind': self.kind.value,
        }


# =============================================================================
# GRAPH
# =============================================================================

@dataclass
class CitationGraph:
    """
    Nodes keyed by id, inferred edges, and topic clusters.

    Invariants:
    - every edge endpoint is a key of ``nodes``
    - a node id appears in at most one cluster list
    """
    nodes: Dict[str, ResearchNode] = field(default_factory=dict)
    edges: List[CitationEdge] = field(default_factory=list)
    clusters: Dict[str, List[str]] = field(default_factory=dict)
    issues: Tuple[BuildIssue, ...] = field(default_factory=tuple)

    def node_ids(self) -> List[str]:
        return list(self.nodes)

    def edge_between(self, a: str, b: str) -> Optional[CitationEdge]:
        for edge in self.edges:
            if (edge.source, edge.target) in ((a, b), (b, a)):
                return edge
        return None

    def cluster_of(self, node_id: str) -> Optional[str]:
        for topic, ids in self.clusters.items():
            if node_id in ids:
                return topic
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'nodes': [node.to_dict() for node in self.nodes.values()],
            'edges': [edge.to_dict() for edge in self.edges],
            'clusters': {topic: list(ids) for topic, ids in self.clusters.items()},
            'issues': [issue.to_dict() for issue in self.issues],
        }
