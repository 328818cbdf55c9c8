"""
Graph Filter Engine

Derives a reduced graph matching a set of predicates.

GUARANTEES:
- Node objects are shared with the source graph, never cloned or mutated
- Every surviving edge has both endpoints in the filtered node map
- Clusters left empty by filtering are dropped
- An empty result is valid, never an error
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Tuple
import logging

from ..contracts.graph import CitationEdge, CitationGraph, ResearchNode
from ..contracts.records import parse_year

logger = logging.getLogger(__name__)

DEFAULT_START_YEAR = 2010
HIGH_IMPACT_CITATIONS = 10
RECENT_WINDOW_YEARS = 2


class NodeCategory(Enum):
    """Publication category implied by title keywords."""
    THESIS = "thesis"
    POSTER = "poster"
    PAPER = "paper"


def classify_category(title: str) -> NodeCategory:
    """Thesis beats poster; anything else is a paper."""
    lowered = title.lower()
    if "thesis" in lowered:
        return NodeCategory.THESIS
    if "poster" in lowered:
        return NodeCategory.POSTER
    return NodeCategory.PAPER


def _this_year() -> int:
    return datetime.now().year


@dataclass(frozen=True)
class FilterSpec:
    """Predicates a node must ALL satisfy to survive filtering."""
    year_range: Tuple[int, int] = field(
        default_factory=lambda: (DEFAULT_START_YEAR, _this_year())
    )
    min_citations: int = 0
    search_query: str = ""
    show_theses: bool = True
    show_papers: bool = True
    show_posters: bool = True

    @classmethod
    def default(cls) -> FilterSpec:
        return cls()

    @classmethod
    def permissive(cls) -> FilterSpec:
        """Matches every node of any graph."""
        return cls(year_range=(0, 9999))

    def high_impact(self) -> FilterSpec:
        return replace(self, min_citations=HIGH_IMPACT_CITATIONS)

    def recent(self, current_year: Optional[int] = None) -> FilterSpec:
        current_year = current_year or _this_year()
        return replace(self, year_range=(current_year - RECENT_WINDOW_YEARS, current_year))

    def allows_category(self, category: NodeCategory) -> bool:
        return {
            NodeCategory.THESIS: self.show_theses,
            NodeCategory.POSTER: self.show_posters,
            NodeCategory.PAPER: self.show_papers,
        }[category]

    def matches(self, node: ResearchNode) -> bool:
        year = parse_year(node.year)
        low, high = self.year_range
        # Unparseable years never fail the range check.
        if year is not None and (year < low or year > high):
            return False
        if (node.citations or 0) < self.min_citations:
            return False
        title = node.title.lower()
        if self.search_query and self.search_query.lower() not in title:
            return False
        return self.allows_category(classify_category(node.title))


def filter_graph(graph: CitationGraph, spec: Optional[FilterSpec] = None) -> CitationGraph:
    """Return a new graph holding only nodes that pass ``spec``."""
    spec = spec or FilterSpec()

    nodes: Dict[str, ResearchNode] = {
        node_id: node
        for node_id, node in graph.nodes.items()
        if spec.matches(node)
    }
    edges: List[CitationEdge] = [
        edge for edge in graph.edges
        if edge.source in nodes and edge.target in nodes
    ]
    clusters: Dict[str, List[str]] = {}
    for topic, ids in graph.clusters.items():
        kept = [node_id for node_id in ids if node_id in nodes]
        if kept:
            clusters[topic] = kept

    logger.debug(
        "Filtered graph %d -> %d nodes, %d -> %d edges",
        len(graph.nodes), len(nodes), len(graph.edges), len(edges),
    )
    return CitationGraph(nodes=nodes, edges=edges, clusters=clusters, issues=graph.issues)
