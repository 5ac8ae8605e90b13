"""Read-only analyses of game snapshots."""

from treasure_hunter.analysis.reachability import (
    passable_graph,
    reachable_treasures,
    summarize_reachability,
)

__all__ = ["passable_graph", "reachable_treasures", "summarize_reachability"]
