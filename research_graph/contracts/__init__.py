"""
Research Graph Contracts

Input records, the graph data model, and build-issue types shared by
every core component.

BOUNDARY ENFORCEMENT:
=====================
1. Input records are frozen
2. Only x/y on ResearchNode change after build
3. Anomalies are EXPLICIT issues, never silent fallbacks
"""

from .errors import IssueCode, BuildIssue, GraphContractError
from .records import Publication, PaperLink, StaticPaper
from .graph import ResearchNode, EdgeKind, CitationEdge, CitationGraph

__all__ = [
    # Errors
    'IssueCode',
    'BuildIssue',
    'GraphContractError',
    # Records
    'Publication',
    'PaperLink',
    'StaticPaper',
    # Graph
    'ResearchNode',
    'EdgeKind',
    'CitationEdge',
    'CitationGraph',
]
