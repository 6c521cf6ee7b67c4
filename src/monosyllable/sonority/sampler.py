"""Random walks over a SonorityGraph to generate syllables."""

import random
from typing import Iterable, Sequence

import numpy as np

from monosyllable.types import (
    EmptyGraph,
    Edge,
    GenerationBoundExceeded,
    PaletteExhausted,
    Partition,
    SampleOutcome,
    SampledSyllable,
    SonorityGraph,
)

# Default step bound is this many times the longest syllable seen in training
BOUND_FACTOR = 2


def weighted_index(weights: Sequence[int], draw: float) -> int:
    """Index of the first cumulative weight strictly greater than `draw`.

    `draw` is expected in [0, sum(weights)).
    """
    if len(weights) == 0:
        raise ValueError("weighted_index needs at least one weight")
    cumulative = np.cumsum(weights)
    idx = int(np.searchsorted(cumulative, draw, side="right"))
    return min(idx, len(cumulative) - 1)


def weighted_choice(weights: Sequence[int], rng: random.Random) -> int:
    """Pick an index with probability proportional to its weight."""
    total = sum(weights)
    return weighted_index(weights, rng.random() * total)


def step_bound(graph: SonorityGraph, max_phones: int | None = None) -> int:
    """Resolve the maximum number of phones one walk may emit."""
    if max_phones is not None:
        if max_phones < 1:
            raise ValueError(f"max_phones must be at least 1, got {max_phones}")
        return max_phones
    return max(BOUND_FACTOR * graph.longest_syllable, 1)


def _allowed(edges: tuple[Edge, ...], palette: frozenset[str] | None) -> list[Edge]:
    if palette is None:
        return list(edges)
    return [e for e in edges if e.target.is_stop or e.target.symbol in palette]


def _walk(
    graph: SonorityGraph,
    rng: random.Random,
    max_phones: int | None,
    palette: frozenset[str] | None,
) -> SampleOutcome:
    start_edges = graph.start_edges()
    if not start_edges:
        return EmptyGraph()

    limit = step_bound(graph, max_phones)
    phones: list[str] = []
    p = Partition.ONSET

    candidates = _allowed(start_edges, palette)
    if not candidates:
        return PaletteExhausted((), Partition.ONSET)
    target = candidates[weighted_choice([e.count for e in candidates], rng)].target

    while not target.is_stop:
        if len(phones) >= limit:
            return GenerationBoundExceeded(tuple(phones), limit)
        phones.append(target.symbol)

        # Not keyed in the current partition: the walk has crossed into a later one
        edges: tuple[Edge, ...] = ()
        while p <= Partition.CODA:
            edges = graph.edges(Partition(p), target)
            if edges:
                break
            p += 1
        if not edges:
            break

        candidates = _allowed(edges, palette)
        if not candidates:
            return PaletteExhausted(tuple(phones), Partition(p))
        target = candidates[weighted_choice([e.count for e in candidates], rng)].target

    return SampledSyllable(tuple(phones))


def sample_syllable(
    graph: SonorityGraph,
    rng: random.Random,
    max_phones: int | None = None,
) -> SampleOutcome:
    """Generate one syllable by a weighted random walk.

    Args:
        graph: A frozen SonorityGraph.
        rng: Random source; pass a seeded random.Random for reproducible output.
        max_phones: Step bound. Defaults to BOUND_FACTOR x the longest
            training syllable.

    Returns:
        SampledSyllable on success, EmptyGraph if there is nothing to start
        from, or GenerationBoundExceeded if the walk ran too long.
    """
    return _walk(graph, rng, max_phones, palette=None)


def sample_syllable_from_palette(
    graph: SonorityGraph,
    palette: Iterable[str],
    rng: random.Random,
    max_phones: int | None = None,
) -> SampleOutcome:
    """Like sample_syllable, but only ever step to phones in `palette`.

    Returns PaletteExhausted as soon as a step has no permitted candidate,
    including the very first one.
    """
    return _walk(graph, rng, max_phones, palette=frozenset(palette))


def sample_many(
    graph: SonorityGraph,
    count: int,
    rng: random.Random,
    palette: Iterable[str] | None = None,
    max_phones: int | None = None,
) -> list[SampleOutcome]:
    """Draw `count` independent samples, constrained to `palette` if given."""
    allowed = None if palette is None else frozenset(palette)
    return [_walk(graph, rng, max_phones, palette=allowed) for _ in range(count)]
