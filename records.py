"""
Input records for routesim and their line-oriented parsers.

Topology, change and message files are read once into frozen records. Lines
that do not start with the expected integer fields are skipped silently, and
a file that cannot be read contributes no records at all.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from pathlib import Path
from typing import Callable, List, Optional, TypeVar, Union

# Change cost meaning "remove this edge".
REMOVE_EDGE = -999

T = TypeVar("T")
PathLike = Union[str, Path]

_MESSAGE_RE = re.compile(r"\s*(\S+)\s+(\S+)(.*)", re.DOTALL)


@dataclass(frozen=True)
class TopologyRecord:
    """Bidirectional edge src <-> dst with cost."""

    src: int
    dst: int
    cost: int


@dataclass(frozen=True)
class ChangeRecord:
    """Edge upsert, or removal when cost is REMOVE_EDGE."""

    src: int
    dst: int
    cost: int

    @property
    def is_removal(self) -> bool:
        return self.cost == REMOVE_EDGE


@dataclass(frozen=True)
class MessageRecord:
    """Data message to trace from source to destination."""

    source: int
    destination: int
    payload: str


def _leading_ints(line: str, count: int) -> Optional[List[int]]:
    fields = line.split()
    if len(fields) < count:
        return None
    try:
        return [int(f) for f in fields[:count]]
    except ValueError:
        return None


def parse_topology_line(line: str) -> Optional[TopologyRecord]:
    """Parse ``src dst cost``; a negative cost makes the line malformed."""
    values = _leading_ints(line, 3)
    if not values or values[2] < 0:
        return None
    return TopologyRecord(*values)


def parse_change_line(line: str) -> Optional[ChangeRecord]:
    """Parse ``src dst cost``; negative costs other than REMOVE_EDGE are malformed."""
    values = _leading_ints(line, 3)
    if not values or (values[2] < 0 and values[2] != REMOVE_EDGE):
        return None
    return ChangeRecord(*values)


def parse_message_line(line: str) -> Optional[MessageRecord]:
    """
    Parse ``src dst payload``.

    The payload is everything after the destination field with exactly one
    leading separator removed, so extra spacing inside it is preserved.
    """
    match = _MESSAGE_RE.match(line.rstrip("\r\n"))
    if match is None:
        return None
    try:
        source, destination = int(match.group(1)), int(match.group(2))
    except ValueError:
        return None
    rest = match.group(3)
    payload = rest[1:] if rest[:1].isspace() else rest
    return MessageRecord(source, destination, payload)


def _load(path: PathLike, parse: Callable[[str], Optional[T]]) -> List[T]:
    try:
        with open(path) as f:
            lines = f.read().splitlines()
    except OSError:
        return []
    records: List[T] = []
    for line in lines:
        if not line.strip():
            continue
        rec = parse(line)
        if rec is not None:
            records.append(rec)
    return records


def load_topology(path: PathLike) -> List[TopologyRecord]:
    return _load(path, parse_topology_line)


def load_changes(path: PathLike) -> List[ChangeRecord]:
    return _load(path, parse_change_line)


def load_messages(path: PathLike) -> List[MessageRecord]:
    return _load(path, parse_message_line)
