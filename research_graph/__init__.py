"""
Research Graph

Turns a list of publications and static papers into a weighted,
topic-clustered graph, lays it out with a force simulation, and filters
it for display.
"""

from .contracts import (
    IssueCode,
    BuildIssue,
    GraphContractError,
    Publication,
    PaperLink,
    StaticPaper,
    ResearchNode,
    EdgeKind,
    CitationEdge,
    CitationGraph,
)
from .core import (
    GraphConfig,
    LayoutConfig,
    FilterSpec,
    build_graph,
    layout_graph,
    filter_graph,
    detect_research_area,
    connected_nodes,
    compute_metrics,
)
from .engine import ResearchNetwork

__version__ = "0.1.0"

__all__ = [
    'IssueCode',
    'BuildIssue',
    'GraphContractError',
    'Publication',
    'PaperLink',
    'StaticPaper',
    'ResearchNode',
    'EdgeKind',
    'CitationEdge',
    'CitationGraph',
    'GraphConfig',
    'LayoutConfig',
    'FilterSpec',
    'build_graph',
    'layout_graph',
    'filter_graph',
    'detect_research_area',
    'connected_nodes',
    'compute_metrics',
    'ResearchNetwork',
]
