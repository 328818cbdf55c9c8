"""
Force-Directed Layout Engine
============================

Places citation graph nodes on a 2D canvas.

SIMULATION:
===========
- Fixed iteration count, no convergence test
- Per node, forces are summed in order: center pull, pairwise
  inverse-square repulsion, edge springs, cluster cohesion
- Nodes are updated one at a time within an iteration, so later nodes
  see the already-moved positions of earlier ones
- No velocity state: the summed force times damping is the displacement
- Coordinates are clamped to a fixed margin after every update

MUTATION:
=========
Writes x/y on the graph's existing nodes and nothing else.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union
import logging

import numpy as np

from ..contracts.errors import GraphContractError
from ..contracts.graph import CitationGraph

logger = logging.getLogger(__name__)

RandomSource = Union[None, int, np.random.Generator]


@dataclass
class LayoutConfig:
    """Force simulation parameters."""
    iterations: int = 100
    repulsion_strength: float = 5000.0
    attraction_strength: float = 0.1
    center_strength: float = 0.01
    cohesion_strength: float = 0.05
    damping: float = 0.85
    margin: float = 50.0


def _as_generator(rng: RandomSource) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


class ForceDirectedLayout:
    """
    Arena-backed force simulation.

    Nodes are copied into a dense position array indexed by insertion
    order; edges and cluster memberships become index arrays so the
    inner loop never touches id strings.
    """

    def __init__(self, config: Optional[LayoutConfig] = None):
        self._config = config or LayoutConfig()

    @property
    def config(self) -> LayoutConfig:
        return self._config

    def _neighbours(
        self,
        graph: CitationGraph,
        index: Dict[str, int]
    ) -> List[Tuple[np.ndarray, np.ndarray]]:
        """Per node: (neighbour indices, edge strengths)."""
        adjacency: List[List[Tuple[int, float]]] = [[] for _ in index]
        for edge in graph.edges:
            i, j = index.get(edge.source), index.get(edge.target)
            if i is None or j is None:
                continue
            adjacency[i].append((j, edge.strength))
            adjacency[j].append((i, edge.strength))
        return [
            (
                np.array([j for j, _ in pairs], dtype=int),
                np.array([s for _, s in pairs], dtype=float),
            )
            for pairs in adjacency
        ]

    def _clustermates(
        self,
        graph: CitationGraph,
        index: Dict[str, int]
    ) -> List[np.ndarray]:
        """Per node: indices of the OTHER nodes in its cluster."""
        mates: List[np.ndarray] = [np.empty(0, dtype=int) for _ in index]
        for ids in graph.clusters.values():
            members = [index[node_id] for node_id in ids if node_id in index]
            for i in members:
                mates[i] = np.array([j for j in members if j != i], dtype=int)
        return mates

    def run(
        self,
        graph: CitationGraph,
        width: float,
        height: float,
        iterations: Optional[int] = None,
        rng: RandomSource = None
    ) -> CitationGraph:
        """Lay out ``graph`` in place and return it."""
        cfg = self._config
        iterations = cfg.iterations if iterations is None else iterations
        if width < 0 or height < 0:
            raise GraphContractError(f"Canvas must be non-negative, got {width}x{height}")
        if iterations < 0:
            raise GraphContractError(f"Iterations must be non-negative, got {iterations}")

        nodes = list(graph.nodes.values())
        index = {node.id: i for i, node in enumerate(nodes)}
        n = len(nodes)

        generator = _as_generator(rng)
        positions = generator.random((n, 2)) * np.array([width, height], dtype=float)

        neighbours = self._neighbours(graph, index)
        mates = self._clustermates(graph, index)
        center = np.array([width / 2.0, height / 2.0])
        upper = np.array([width - cfg.margin, height - cfg.margin])

        for _ in range(iterations):
            for i in range(n):
                pos = positions[i]
                force = (center - pos) * cfg.center_strength

                # Repulsion, zero distance counts as one
                delta = pos - positions
                distance = np.hypot(delta[:, 0], delta[:, 1])
                distance[distance == 0] = 1.0
                magnitude = cfg.repulsion_strength / (distance * distance)
                push = delta / distance[:, None] * magnitude[:, None]
                push[i] = 0.0
                force = force + push.sum(axis=0)

                # Springs: (d / |d|) * |d| * k * s reduces to d * k * s
                others, strengths = neighbours[i]
                if others.size:
                    pull = positions[others] - pos
                    force = force + (
                        pull * (cfg.attraction_strength * strengths)[:, None]
                    ).sum(axis=0)

                if mates[i].size:
                    centroid = positions[mates[i]].mean(axis=0)
                    force = force + (centroid - pos) * cfg.cohesion_strength

                moved = pos + force * cfg.damping
                positions[i] = np.maximum(cfg.margin, np.minimum(upper, moved))

        for node, (x, y) in zip(nodes, positions):
            node.x = float(x)
            node.y = float(y)

        logger.debug(
            "Laid out %d nodes on %sx%s canvas in %d iterations",
            n, width, height, iterations,
        )
        return graph


def layout_graph(
    graph: CitationGraph,
    width: float,
    height: float,
    iterations: Optional[int] = None,
    config: Optional[LayoutConfig] = None,
    rng: RandomSource = None
) -> CitationGraph:
    """Run a force-directed layout over ``graph`` (mutated and returned)."""
    return ForceDirectedLayout(config).run(graph, width, height, iterations, rng)
