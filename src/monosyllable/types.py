"""Core data types for monosyllable."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Mapping, Union


class Partition(IntEnum):
    """The three zones of a syllable, always traversed in this order."""
    ONSET = 0
    NUCLEUS = 1
    CODA = 2


class EndpointKind(Enum):
    START = "start"
    PHONE = "phone"
    STOP = "stop"


@dataclass(frozen=True)
class Endpoint:
    """One end of a transition: START, a phone, or STOP."""
    kind: EndpointKind
    symbol: str | None = None

    @property
    def is_start(self) -> bool:
        return self.kind is EndpointKind.START

    @property
    def is_stop(self) -> bool:
        return self.kind is EndpointKind.STOP

    @property
    def is_phone(self) -> bool:
        return self.kind is EndpointKind.PHONE

    def __str__(self) -> str:
        if self.is_phone:
            return self.symbol
        return f"<{self.kind.value}>"


START = Endpoint(EndpointKind.START)
STOP = Endpoint(EndpointKind.STOP)


def phone(symbol: str) -> Endpoint:
    """Wrap an IPA symbol as a phone endpoint."""
    return Endpoint(EndpointKind.PHONE, symbol)


@dataclass(frozen=True)
class Edge:
    """A weighted transition to `target`."""
    target: Endpoint
    count: int


# source endpoint -> edges in first-seen order
TransitionTable = Mapping[Endpoint, tuple[Edge, ...]]


@dataclass(frozen=True)
class SonorityGraph:
    """Three frozen transition tables, one per Partition.

    Built once by a GraphBuilder and shared read-only by samplers.
    """
    tables: tuple[TransitionTable, TransitionTable, TransitionTable]
    longest_syllable: int = 0
    syllable_count: int = 0

    def table(self, partition: Partition) -> TransitionTable:
        return self.tables[partition]

    def edges(self, partition: Partition, source: Endpoint) -> tuple[Edge, ...]:
        """Edges leaving `source` in `partition`, or () if it is not a key there."""
        return self.tables[partition].get(source, ())

    def start_edges(self) -> tuple[Edge, ...]:
        return self.edges(Partition.ONSET, START)

    def edge_count(self) -> int:
        return sum(len(edges) for table in self.tables for edges in table.values())

    def counts(self) -> dict[tuple[int, Endpoint, Endpoint], int]:
        """Flatten to {(partition, source, target): count} for comparisons."""
        return {
            (int(p), source, e.target): e.count
            for p, table in enumerate(self.tables)
            for source, edges in table.items()
            for e in edges
        }


def freeze_tables(
    tables: list[dict[Endpoint, dict[Endpoint, int]]],
    longest_syllable: int = 0,
    syllable_count: int = 0,
) -> SonorityGraph:
    """Turn mutable count tables into an immutable SonorityGraph.

    Dict insertion order is kept, so edges stay in first-seen order.
    """
    if len(tables) != len(Partition):
        raise ValueError(f"expected {len(Partition)} tables, got {len(tables)}")

    frozen = []
    for p, table in enumerate(tables):
        part: dict[Endpoint, tuple[Edge, ...]] = {}
        for source, targets in table.items():
            if source.is_stop:
                raise ValueError("STOP cannot be a transition source")
            if source.is_start and p != Partition.ONSET:
                raise ValueError("START may only be a source in the onset table")
            edges = []
            for target, count in targets.items():
                if target.is_start:
                    raise ValueError("START cannot be a transition target")
                if count <= 0:
                    raise ValueError(f"edge weight must be positive, got {count}")
                edges.append(Edge(target, count))
            if edges:
                part[source] = tuple(edges)
        frozen.append(MappingProxyType(part))

    return SonorityGraph(
        tables=tuple(frozen),
        longest_syllable=longest_syllable,
        syllable_count=syllable_count,
    )


def _endpoint_to_json(endpoint: Endpoint) -> str | None:
    # START and STOP never share a position, so null is unambiguous on disk
    return endpoint.symbol if endpoint.is_phone else None


def graph_to_dict(graph: SonorityGraph) -> dict:
    """Convert a graph to a JSON-safe dict."""
    return {
        "longest_syllable": graph.longest_syllable,
        "syllable_count": graph.syllable_count,
        "parts": [
            [
                {
                    "source": _endpoint_to_json(source),
                    "edges": [[_endpoint_to_json(e.target), e.count] for e in edges],
                }
                for source, edges in table.items()
            ]
            for table in graph.tables
        ],
    }


def graph_from_dict(data: dict) -> SonorityGraph:
    """Reconstruct a SonorityGraph from graph_to_dict output."""
    tables: list[dict[Endpoint, dict[Endpoint, int]]] = []
    for entries in data["parts"]:
        table: dict[Endpoint, dict[Endpoint, int]] = {}
        for entry in entries:
            source = START if entry["source"] is None else phone(entry["source"])
            table[source] = {
                (STOP if target is None else phone(target)): int(count)
                for target, count in entry["edges"]
            }
        tables.append(table)
    return freeze_tables(
        tables,
        longest_syllable=data.get("longest_syllable", 0),
        syllable_count=data.get("syllable_count", 0),
    )


@dataclass(frozen=True)
class Segmentation:
    """A syllable split into onset, nucleus and coda."""
    onset: tuple[str, ...]
    nucleus: tuple[str, ...]
    coda: tuple[str, ...]

    ok = True

    def parts(self) -> tuple[tuple[str, ...], tuple[str, ...], tuple[str, ...]]:
        return (self.onset, self.nucleus, self.coda)


@dataclass(frozen=True)
class MalformedSyllable:
    """Segmentation reject: the syllable contributes nothing."""
    phones: tuple[str, ...]
    reason: str

    ok = False


@dataclass(frozen=True)
class SampledSyllable:
    """A successfully generated syllable."""
    phones: tuple[str, ...]

    ok = True

    def __str__(self) -> str:
        return "".join(self.phones)


@dataclass(frozen=True)
class EmptyGraph:
    """Sampling was requested on a graph with no START edges."""
    ok = False

    def __str__(self) -> str:
        return "empty graph: no syllable starts"


@dataclass(frozen=True)
class PaletteExhausted:
    """No edge satisfied the palette filter."""
    partial: tuple[str, ...] = ()
    partition: Partition = Partition.ONSET

    ok = False

    def __str__(self) -> str:
        so_far = "".join(self.partial) or "-"
        return f"palette exhausted in {self.partition.name.lower()} after {so_far}"


@dataclass(frozen=True)
class GenerationBoundExceeded:
    """The walk emitted more than `limit` phones without reaching STOP."""
    partial: tuple[str, ...] = ()
    limit: int = 0

    ok = False

    def __str__(self) -> str:
        return f"generation bound of {self.limit} phones exceeded"


SegmentOutcome = Union[Segmentation, MalformedSyllable]
SampleOutcome = Union[SampledSyllable, EmptyGraph, PaletteExhausted, GenerationBoundExceeded]


@dataclass
class SampleRun:
    """Output of the monosyllable pipeline."""
    graph: SonorityGraph
    outcomes: list[SampleOutcome] = field(default_factory=list)

    @property
    def syllables(self) -> list[SampledSyllable]:
        return [o for o in self.outcomes if o.ok]

    @property
    def failures(self) -> list[SampleOutcome]:
        return [o for o in self.outcomes if not o.ok]
