"""Which treasures the hunter can still reach, ignoring future obstacle spawns."""

from __future__ import annotations

import networkx as nx

from treasure_hunter.config.constants import TREASURE_VALUES
from treasure_hunter.domain.cell import CellKind, Treasure
from treasure_hunter.domain.snapshot import GameSnapshot


def passable_graph(snapshot: GameSnapshot) -> nx.Graph:
    """Graph of non-obstacle cells with edges between 4-neighbours."""
    graph = nx.grid_2d_graph(snapshot.rows, snapshot.cols)
    graph.remove_nodes_from(snapshot.positions_of(CellKind.OBSTACLE))
    return graph


def reachable_treasures(snapshot: GameSnapshot) -> dict[int, int]:
    """Count treasures per value in the hunter's connected region.

    All counts are zero when no hunter is placed.
    """
    counts = {value: 0 for value in TREASURE_VALUES}
    if snapshot.hunter_position is None:
        return counts
    graph = passable_graph(snapshot)
    for row, col in nx.node_connected_component(graph, snapshot.hunter_position):
        cell = snapshot.cell(row, col)
        if isinstance(cell, Treasure):
            counts[cell.value] += 1
    return counts


def summarize_reachability(snapshot: GameSnapshot) -> dict[str, object]:
    """Reachable vs stranded treasure totals and the reachable score ceiling."""
    reachable = reachable_treasures(snapshot)
    reachable_total = sum(reachable.values())
    return {
        "reachable_treasures": {str(k): v for k, v in reachable.items()},
        "reachable_total": reachable_total,
        "stranded_total": snapshot.total_treasures - reachable_total,
        "reachable_value": sum(value * n for value, n in reachable.items()),
    }
