"""
Research Network Orchestration

Coordinates build, layout and filtering for one rendering surface.

DESIGN PRINCIPLES:
==================
1. Build and layout run once per input snapshot or canvas size
2. Filters re-run against the cached laid-out graph, never rebuild it
3. Highlight takes precedence over selection for connected nodes
"""

from __future__ import annotations
from typing import Optional, Sequence, Set

from .contracts.graph import CitationGraph, ResearchNode
from .contracts.records import Publication, StaticPaper
from .core.builder import CitationGraphBuilder, GraphConfig
from .core.filters import FilterSpec, filter_graph
from .core.layout import ForceDirectedLayout, LayoutConfig, RandomSource
from .core.topology import GraphMetrics, compute_metrics, connected_nodes


class ResearchNetwork:
    """
    Built, laid-out citation graph plus the current filter and selection.

    LAYER FLOW:
    ===========
    1. Builder: records -> CitationGraph
    2. Layout: CitationGraph -> same graph with x/y
    3. Filter: laid-out graph -> filtered view (shared nodes)
    """

    def __init__(
        self,
        publications: Sequence[Publication],
        static_papers: Sequence[StaticPaper] = (),
        width: float = 800,
        height: float = 600,
        *,
        graph_config: Optional[GraphConfig] = None,
        layout_config: Optional[LayoutConfig] = None,
        filters: Optional[FilterSpec] = None,
        rng: RandomSource = None,
        current_year: Optional[int] = None
    ):
        self._builder = CitationGraphBuilder(graph_config, current_year)
        self._layout = ForceDirectedLayout(layout_config)
        self._rng = rng

        self._graph = self._builder.build_graph(publications, static_papers)
        self._layout.run(self._graph, width, height, rng=self._rng)

        self._filters = filters or FilterSpec()
        self._filtered = filter_graph(self._graph, self._filters)
        self._selected: Optional[str] = None
        self._highlighted: Optional[str] = None

    # =========================================================================
    # GRAPH ACCESS
    # =========================================================================

    @property
    def graph(self) -> CitationGraph:
        return self._graph

    @property
    def filtered_graph(self) -> CitationGraph:
        return self._filtered

    @property
    def filters(self) -> FilterSpec:
        return self._filters

    def apply_filters(self, spec: FilterSpec) -> CitationGraph:
        """Re-filter the cached graph; layout is not recomputed."""
        self._filters = spec
        self._filtered = filter_graph(self._graph, spec)
        return self._filtered

    def relayout(self, width: float, height: float) -> CitationGraph:
        """Re-run layout for a new canvas size and refresh the filtered view."""
        self._layout.run(self._graph, width, height, rng=self._rng)
        self._filtered = filter_graph(self._graph, self._filters)
        return self._graph

    def metrics(self, filtered: bool = True) -> GraphMetrics:
        return compute_metrics(self._filtered if filtered else self._graph)

    # =========================================================================
    # SELECTION
    # =========================================================================

    def _lookup(self, node_id: Optional[str]) -> Optional[ResearchNode]:
        return self._graph.nodes.get(node_id) if node_id is not None else None

    @property
    def selected_node(self) -> Optional[ResearchNode]:
        return self._lookup(self._selected)

    @property
    def highlighted_node(self) -> Optional[ResearchNode]:
        return self._lookup(self._highlighted)

    def select(self, node_id: Optional[str]):
        self._selected = node_id

    def highlight(self, node_id: Optional[str]):
        self._highlighted = node_id

    def clear_selection(self):
        self._selected = None
        self._highlighted = None

    @property
    def connected_nodes(self) -> Set[str]:
        """Active node and its neighbours within the filtered view."""
        active = self._highlighted or self._selected
        return connected_nodes(self._filtered, active)
