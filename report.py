"""
Text rendering of simulation snapshots in the distvec/linkstate output format.
"""

from pathlib import Path
from typing import Iterable, List, Union

from routing import RouteEntry
from simulation import Snapshot
from tracer import MessageTrace

CHANGE_SEPARATOR = "----- At this point, change is applied"


def format_route(entry: RouteEntry) -> str:
    return f"{entry.dest} {entry.next_hop} {entry.cost}"


def format_trace(trace: MessageTrace) -> str:
    if not trace.reachable:
        return (
            f"from {trace.source} to {trace.destination} "
            f"cost infinite hops unreachable message {trace.payload}"
        )
    hops = " ".join(str(h) for h in trace.hops)
    return (
        f"from {trace.source} to {trace.destination} "
        f"cost {trace.cost} hops {hops} message {trace.payload}"
    )


def render_snapshot(snapshot: Snapshot, separator: str = CHANGE_SEPARATOR) -> List[str]:
    """Lines for one snapshot, preceded by separator unless it is the first."""
    lines: List[str] = []
    if snapshot.index > 0:
        lines.append(separator)
    for node in sorted(snapshot.tables):
        lines.append(f"<forwarding table entries for node {node}>")
        lines.extend(format_route(e) for e in snapshot.tables[node])
    lines.append("<message output lines>")
    lines.extend(format_trace(t) for t in snapshot.traces)
    return lines


def write_report(
    snapshots: Iterable[Snapshot],
    path: Union[str, Path],
    separator: str = CHANGE_SEPARATOR,
) -> int:
    """Write every snapshot to path; returns the number of snapshots written."""
    count = 0
    with open(path, "w") as f:
        for snapshot in snapshots:
            for line in render_snapshot(snapshot, separator):
                f.write(line + "\n")
            count += 1
    return count
