"""
Citation Graph Builder

Constructs a citation graph from publications and static papers.

BOUNDARY ENFORCEMENT:
- Consumes Publication and StaticPaper records
- Produces CitationGraph with x/y left at 0,0
- NO layout, NO filtering

There is no citation-link data: every edge is inferred from shared
authors, a shared venue, or a shared research area, in that priority.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional, Sequence, Tuple
import logging

from ..contracts.errors import BuildIssue, IssueCode
from ..contracts.graph import CitationEdge, CitationGraph, EdgeKind, ResearchNode
from ..contracts.records import Publication, StaticPaper, parse_year
from .topics import GENERAL, area_keys, research_area_for, topic_color

logger = logging.getLogger(__name__)

STATIC_SOURCE = "static"


# =============================================================================
# CONFIGURATION
# =============================================================================

@dataclass
class GraphConfig:
    """Configuration for citation graph construction."""
    author_match_divisor: float = 3.0
    venue_strength: float = 0.3
    topic_strength: float = 0.2
    citation_saturation: float = 100.0
    recency_window: float = 20.0
    # Not derived from edges: a fixed stand-in for connectivity.
    connection_score: float = 0.5
    base_radius: float = 20.0
    radius_scale: float = 30.0


# =============================================================================
# INFLUENCE
# =============================================================================

def calculate_influence(
    citations: int,
    year: int,
    current_year: int,
    config: Optional[GraphConfig] = None
) -> float:
    """
    Blend citation count and recency into a score in [0, 1].

    0.5 * citations + 0.3 * recency + 0.2 * connection placeholder.
    """
    config = config or GraphConfig()
    citation_score = min(1.0, max(0, citations) / config.citation_saturation)
    recency_score = max(0.0, 1.0 - (current_year - year) / config.recency_window)
    # Future-dated years would otherwise push influence above 1.
    recency_score = min(1.0, recency_score)
    return (
        citation_score * 0.5
        + recency_score * 0.3
        + config.connection_score * 0.2
    )


def static_paper_year(date: str) -> Optional[str]:
    """Year portion of a ``"<month>.<year>"`` date, or None when malformed."""
    if "." not in date:
        return None
    year = date.rsplit(".", 1)[1].strip()
    return year if parse_year(year) is not None else None


# =============================================================================
# NODE BUILDERS
# =============================================================================

class NodeBuilder:
    """Build research nodes from input records."""

    def __init__(self, config: GraphConfig, current_year: int):
        self._config = config
        self._current_year = current_year
        self.issues: List[BuildIssue] = []

    def record_issue(self, code: IssueCode, record_key: str, message: str):
        issue = BuildIssue(code=code, record_key=record_key, message=message)
        logger.warning("%s [%s]: %s", code.value, record_key, message)
        self.issues.append(issue)

    def _styled(self, citations: int, year: int, topic: str) -> Tuple[float, float, str]:
        influence = calculate_influence(citations, year, self._current_year, self._config)
        radius = self._config.base_radius + influence * self._config.radius_scale
        return influence, radius, topic_color(topic)

    def create_publication_node(self, pub: Publication) -> ResearchNode:
        """Create a node for a fetched publication."""
        topic = research_area_for(pub)
        citations = max(0, int(pub.citations or 0))

        year = parse_year(pub.year)
        if year is None:
            self.record_issue(
                IssueCode.MALFORMED_YEAR,
                pub.id,
                f"unparseable year {pub.year!r}; recency uses {self._current_year}",
            )
            year = self._current_year

        influence, radius, color = self._styled(citations, year, topic)
        return ResearchNode(
            id=pub.id,
            title=pub.title,
            authors=tuple(pub.authors),
            year=pub.year,
            topic=topic,
            color=color,
            influence=influence,
            radius=radius,
            venue=pub.venue,
            citations=citations,
            abstract=pub.abstract,
            pdf_url=pub.pdf_url,
            source=pub.source,
        )

    def create_static_node(self, paper: StaticPaper, index: int) -> ResearchNode:
        """Create a node for a static paper card at ``index``."""
        node_id = f"static-{index}"
        topic = research_area_for(paper)

        year = static_paper_year(paper.date)
        if year is None:
            self.record_issue(
                IssueCode.MALFORMED_DATE,
                node_id,
                f"no year in date {paper.date!r}; using {self._current_year}",
            )
            year = str(self._current_year)

        influence, radius, color = self._styled(0, parse_year(year), topic)
        return ResearchNode(
            id=node_id,
            title=paper.title,
            authors=(),
            year=year,
            topic=topic,
            color=color,
            influence=influence,
            radius=radius,
            venue=None,
            citations=0,
            abstract=paper.subtitle,
            pdf_url=paper.pdf_url,
            source=STATIC_SOURCE,
        )


# =============================================================================
# EDGE BUILDERS
# =============================================================================

def _last_name(author: str) -> Optional[str]:
    tokens = author.lower().split()
    return tokens[-1] if tokens else None


def _same_author(a: str, b: str) -> bool:
    """True when either author's last name appears inside the other's name."""
    last_a, last_b = _last_name(a), _last_name(b)
    return bool(
        (last_b and last_b in a.lower())
        or (last_a and last_a in b.lower())
    )


def shared_author_count(first: ResearchNode, second: ResearchNode) -> int:
    """Number of ``first``'s authors that match some author of ``second``."""
    return sum(
        1 for a in first.authors
        if any(_same_author(a, b) for b in second.authors)
    )


class EdgeBuilder:
    """Infer at most one edge per node pair."""

    def __init__(self, config: GraphConfig):
        self._config = config

    def infer_edge(
        self,
        first: ResearchNode,
        second: ResearchNode
    ) -> Optional[CitationEdge]:
        """Apply author > venue > topic heuristics; first hit wins."""
        matches = shared_author_count(first, second)
        if matches > 0:
            return CitationEdge(
                source=first.id,
                target=second.id,
                strength=min(1.0, matches / self._config.author_match_divisor),
                kind=EdgeKind.AUTHOR,
            )

        if first.venue and second.venue and first.venue == second.venue:
            return CitationEdge(
                source=first.id,
                target=second.id,
                strength=self._config.venue_strength,
                kind=EdgeKind.VENUE,
            )

        if first.topic == second.topic and first.topic != GENERAL:
            return CitationEdge(
                source=first.id,
                target=second.id,
                strength=self._config.topic_strength,
                kind=EdgeKind.TOPIC,
            )

        return None


# =============================================================================
# CITATION GRAPH BUILDER
# =============================================================================

class CitationGraphBuilder:
    """
    Build citation graphs from publication snapshots.

    Clusters are pre-seeded with every known area key, so an empty input
    still yields one (empty) list per topic.
    """

    def __init__(
        self,
        config: Optional[GraphConfig] = None,
        current_year: Optional[int] = None
    ):
        self._config = config or GraphConfig()
        self._current_year = current_year or datetime.now().year
        self._edge_builder = EdgeBuilder(self._config)

    def build_graph(
        self,
        publications: Sequence[Publication],
        static_papers: Sequence[StaticPaper] = ()
    ) -> CitationGraph:
        node_builder = NodeBuilder(self._config, self._current_year)
        nodes: Dict[str, ResearchNode] = {}
        clusters: Dict[str, List[str]] = {key: [] for key in area_keys()}

        candidates = [node_builder.create_publication_node(pub) for pub in publications]
        candidates.extend(
            node_builder.create_static_node(paper, index)
            for index, paper in enumerate(static_papers)
        )

        for node in candidates:
            if node.id in nodes:
                node_builder.record_issue(
                    IssueCode.DUPLICATE_ID,
                    node.id,
                    f"duplicate id; keeping first record {nodes[node.id].title!r}",
                )
                continue
            nodes[node.id] = node
            clusters[node.topic].append(node.id)

        edges: List[CitationEdge] = []
        ordered = list(nodes.values())
        for i, first in enumerate(ordered):
            for second in ordered[i + 1:]:
                edge = self._edge_builder.infer_edge(first, second)
                if edge is not None:
                    edges.append(edge)

        logger.debug(
            "Built citation graph: %d nodes, %d edges, %d issues",
            len(nodes), len(edges), len(node_builder.issues),
        )
        return CitationGraph(
            nodes=nodes,
            edges=edges,
            clusters=clusters,
            issues=tuple(node_builder.issues),
        )


def build_graph(
    publications: Sequence[Publication],
    static_papers: Sequence[StaticPaper] = (),
    config: Optional[GraphConfig] = None,
    current_year: Optional[int] = None
) -> CitationGraph:
    """Build a citation graph with a one-off builder."""
    return CitationGraphBuilder(config, current_year).build_graph(publications, static_papers)
