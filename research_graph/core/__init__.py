"""
Research Graph Core

RESPONSIBILITY: Graph construction, force layout, filtering, topology
ALLOWED INPUTS: Publication / StaticPaper records, CitationGraph
OUTPUTS: CitationGraph (built, laid out in place, or filtered copy)

Data flows one way: builder -> layout -> filter. Filtering does not
require layout to have run, and can be repeated without rebuilding.
"""

from .topics import (
    GENERAL,
    RESEARCH_AREAS,
    ResearchArea,
    area_keys,
    detect_research_area,
    research_area_for,
    topic_color,
)
from .builder import (
    GraphConfig,
    CitationGraphBuilder,
    build_graph,
    calculate_influence,
)
from .layout import LayoutConfig, ForceDirectedLayout, layout_graph
from .filters import FilterSpec, NodeCategory, classify_category, filter_graph
from .topology import GraphMetrics, compute_metrics, connected_nodes, to_networkx

__all__ = [
    # Topics
    'GENERAL',
    'RESEARCH_AREAS',
    'ResearchArea',
    'area_keys',
    'detect_research_area',
    'research_area_for',
    'topic_color',
    # Builder
    'GraphConfig',
    'CitationGraphBuilder',
    'build_graph',
    'calculate_influence',
    # Layout
    'LayoutConfig',
    'ForceDirectedLayout',
    'layout_graph',
    # Filter
    'FilterSpec',
    'NodeCategory',
    'classify_category',
    'filter_graph',
    # Topology
    'GraphMetrics',
    'compute_metrics',
    'connected_nodes',
    'to_networkx',
]
