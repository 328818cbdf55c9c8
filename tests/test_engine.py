"""
Research Network Orchestration Tests
"""

from research_graph import FilterSpec, ResearchNetwork
from tests.fixtures import (
    CURRENT_YEAR,
    PAPER_ML,
    PAPER_VESTIBULAR,
    PUB_BLOCKCHAIN,
    PUB_NEURO,
    PUB_NLP,
    scenario_publications,
)


def make_network(**kwargs):
    kwargs.setdefault("rng", 11)
    kwargs.setdefault("current_year", CURRENT_YEAR)
    return ResearchNetwork(
        [PUB_NEURO, PUB_NLP, PUB_BLOCKCHAIN] + scenario_publications(),
        [PAPER_VESTIBULAR, PAPER_ML],
        800,
        600,
        **kwargs,
    )


class TestResearchNetwork:

    def test_builds_and_lays_out(self):
        network = make_network()

        assert len(network.graph.nodes) == 7
        assert all(50 <= n.x <= 750 and 50 <= n.y <= 550 for n in network.graph.nodes.values())

    def test_refilter_reuses_layout(self):
        network = make_network(filters=FilterSpec.permissive())
        positions = {n.id: (n.x, n.y) for n in network.graph.nodes.values()}

        filtered = network.apply_filters(FilterSpec(year_range=(0, 9999), min_citations=20))

        assert network.filters.min_citations == 20
        assert sorted(filtered.nodes) == ["p1", "pub1", "pub2", "pub3"]
        assert {n.id: (n.x, n.y) for n in network.graph.nodes.values()} == positions
        assert filtered.nodes["p1"] is network.graph.nodes["p1"]

    def test_relayout_refreshes_filtered_view(self):
        network = make_network()
        network.relayout(300, 300)

        assert all(50 <= n.x <= 250 for n in network.filtered_graph.nodes.values())

    def test_highlight_overrides_selection(self):
        network = make_network(filters=FilterSpec.permissive())

        network.select("p1")
        assert network.selected_node.title == "Neural Evolution Methods"
        assert network.connected_nodes == {"p1", "p2", "pub1"}

        network.highlight("pub3")
        assert network.connected_nodes == {"pub3", "static-1"}

        network.clear_selection()
        assert network.connected_nodes == set()
        assert network.selected_node is None

    def test_connected_nodes_limited_to_filtered_view(self):
        network = make_network(filters=FilterSpec(year_range=(0, 9999), min_citations=20))
        network.select("p1")

        assert network.connected_nodes == {"p1", "pub1"}

    def test_metrics(self):
        network = make_network(filters=FilterSpec.permissive())

        assert network.metrics().node_count == 7
        assert network.metrics(filtered=False).edge_count == len(network.graph.edges)
