"""
CLI to run a routing simulation over topology, message and change files.

    distvec   topofile messagefile changesfile
    linkstate topofile messagefile changesfile
    routesim  topofile messagefile changesfile   (algorithm from config)

All snapshots are written to one output file (output.txt by default).
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterator, List, Optional, Sequence
import os
import sys

from adjacency_list_graph import AdjacencyListGraph
from algorithms import RoutingEngine
from config import SimulationConfig, config_from_env
from records import load_changes, load_messages, load_topology
from report import write_report
from simulation import Snapshot, get_engine, run_simulation


def _engine_work(engine: RoutingEngine) -> str:
    if hasattr(engine, "last_rounds"):
        return f"rounds={engine.last_rounds} updates={engine.last_updates}"
    if hasattr(engine, "last_relaxed"):
        return f"relaxed={engine.last_relaxed}"
    return ""


def _observe(
    snapshots: Iterator[Snapshot],
    graph: AdjacencyListGraph,
    engine: RoutingEngine,
    cfg: SimulationConfig,
) -> Iterator[Snapshot]:
    for snap in snapshots:
        if cfg.verify:
            for problem in snap.state.check_invariants(graph):
                print(f"[run] invariant violation snapshot={snap.index}: {problem}")
        if cfg.verbose:
            routes = sum(len(t) for t in snap.tables.values())
            unreachable = sum(1 for t in snap.traces if not t.reachable)
            print(
                f"[run] snapshot={snap.index} {_engine_work(engine)} "
                f"routes={routes} unreachable={unreachable}"
            )
        yield snap


def run(
    topology_path: str,
    message_path: str,
    change_path: str,
    cfg: SimulationConfig,
) -> int:
    """Run the full pipeline; returns the number of snapshots written."""
    topology = load_topology(topology_path)
    messages = load_messages(message_path)
    changes = load_changes(change_path)

    graph = AdjacencyListGraph.from_records(topology)
    engine = get_engine(cfg.algorithm)
    if cfg.verbose:
        print(
            f"[run] engine={engine.name} nodes={len(graph)} "
            f"messages={len(messages)} changes={len(changes)}"
        )

    snapshots = _observe(run_simulation(graph, messages, changes, engine), graph, engine, cfg)
    count = write_report(snapshots, cfg.output, cfg.separator)
    if cfg.verbose:
        print(f"[run] wrote {count} snapshots to {cfg.output}")
    return count


def main(argv: Optional[Sequence[str]] = None, algorithm: Optional[str] = None, prog: Optional[str] = None) -> int:
    args: List[str] = list(sys.argv[1:] if argv is None else argv)
    prog = prog or os.path.basename(sys.argv[0]) or "routesim"
    if len(args) != 3:
        print(f"Usage: {prog} topofile messagefile changesfile", file=sys.stderr)
        return 2

    cfg = config_from_env()
    if algorithm is not None:
        cfg = replace(cfg, algorithm=algorithm)
    run(args[0], args[1], args[2], cfg)
    return 0


def distvec() -> None:
    sys.exit(main(algorithm="distance_vector", prog="distvec"))


def linkstate() -> None:
    sys.exit(main(algorithm="link_state", prog="linkstate"))


if __name__ == "__main__":
    sys.exit(main())
