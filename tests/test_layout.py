"""
Force-Directed Layout Tests
===========================

Initial placement is random, so these tests inject a seed and assert
invariants (bounds, determinism under a seed, untouched structure)
rather than exact coordinates.
"""

import numpy as np
import pytest

from research_graph.contracts import GraphContractError
from research_graph.core.builder import build_graph
from research_graph.core.filters import FilterSpec, filter_graph
from research_graph.core.layout import ForceDirectedLayout, LayoutConfig, layout_graph
from tests.fixtures import (
    CURRENT_YEAR,
    PAPER_ML,
    PAPER_VESTIBULAR,
    PUB_BLOCKCHAIN,
    PUB_NEURO,
    PUB_NLP,
    scenario_publications,
)


def sample_graph():
    return build_graph(
        [PUB_NEURO, PUB_NLP, PUB_BLOCKCHAIN] + scenario_publications(),
        [PAPER_VESTIBULAR, PAPER_ML],
        current_year=CURRENT_YEAR,
    )


class TestLayoutBounds:

    def test_nodes_within_margin(self):
        graph = layout_graph(sample_graph(), 800, 600, rng=7)

        for node in graph.nodes.values():
            assert 50 <= node.x <= 750
            assert 50 <= node.y <= 550

    def test_custom_margin(self):
        config = LayoutConfig(margin=100)
        graph = layout_graph(sample_graph(), 800, 600, iterations=10, config=config, rng=1)

        for node in graph.nodes.values():
            assert 100 <= node.x <= 700
            assert 100 <= node.y <= 500

    def test_zero_iterations_keeps_random_start(self):
        graph = layout_graph(sample_graph(), 800, 600, iterations=0, rng=3)

        for node in graph.nodes.values():
            assert 0 <= node.x <= 800
            assert 0 <= node.y <= 600


class TestLayoutContract:

    def test_returns_same_graph(self):
        graph = sample_graph()
        assert layout_graph(graph, 800, 600, rng=0) is graph

    def test_structure_untouched(self):
        graph = sample_graph()
        edges = list(graph.edges)
        clusters = {k: list(v) for k, v in graph.clusters.items()}
        styles = {n.id: (n.radius, n.color, n.influence) for n in graph.nodes.values()}

        layout_graph(graph, 800, 600, rng=0)

        assert graph.edges == edges
        assert graph.clusters == clusters
        assert {n.id: (n.radius, n.color, n.influence) for n in graph.nodes.values()} == styles

    def test_seed_is_reproducible(self):
        first = layout_graph(sample_graph(), 800, 600, iterations=25, rng=42)
        second = layout_graph(sample_graph(), 800, 600, iterations=25, rng=42)

        assert [(n.x, n.y) for n in first.nodes.values()] == [
            (n.x, n.y) for n in second.nodes.values()
        ]

    def test_accepts_generator(self):
        graph = layout_graph(sample_graph(), 800, 600, iterations=5, rng=np.random.default_rng(9))
        assert all(isinstance(n.x, float) for n in graph.nodes.values())

    def test_default_iterations(self):
        assert ForceDirectedLayout().config.iterations == 100


class TestDegenerateInput:

    def test_empty_graph(self):
        graph = build_graph([], [], current_year=CURRENT_YEAR)
        assert layout_graph(graph, 800, 600, rng=0) is graph

    def test_zero_canvas_does_not_raise(self):
        """Every node starts at the origin, so all pair distances are zero."""
        graph = layout_graph(sample_graph(), 0, 0, iterations=3, rng=0)

        # Clamp is max(margin, min(size - margin, v)), so the margin wins.
        for node in graph.nodes.values():
            assert (node.x, node.y) == (50.0, 50.0)

    def test_single_node(self):
        graph = build_graph(scenario_publications()[:1], current_year=CURRENT_YEAR)
        layout_graph(graph, 400, 400, rng=0)
        node = graph.nodes["p1"]
        assert 50 <= node.x <= 350 and 50 <= node.y <= 350

    def test_filtered_graph(self):
        """Clusters may reference ids missing from a filtered graph."""
        filtered = filter_graph(sample_graph(), FilterSpec(year_range=(2023, 2025)))
        layout_graph(filtered, 800, 600, iterations=10, rng=0)
        assert all(50 <= n.x <= 750 for n in filtered.nodes.values())

    @pytest.mark.parametrize("width, height, iterations", [
        (-1, 600, 10),
        (800, -5, 10),
        (800, 600, -1),
    ])
    def test_invalid_arguments(self, width, height, iterations):
        with pytest.raises(GraphContractError):
            layout_graph(sample_graph(), width, height, iterations=iterations)
