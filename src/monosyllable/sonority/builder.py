"""Accumulate transition counts from a syllabified corpus into a SonorityGraph."""

import logging
from typing import Callable, Iterable, Sequence

from monosyllable.phones import DEFAULT_INVENTORY, PhoneInventory
from monosyllable.sonority.segmenter import segment_syllable
from monosyllable.types import (
    START,
    STOP,
    Endpoint,
    Partition,
    SegmentOutcome,
    Segmentation,
    SonorityGraph,
    freeze_tables,
    phone,
)

logger = logging.getLogger(__name__)

Corpus = Iterable[tuple[str, Sequence[Sequence[str]]]]
ProgressFn = Callable[[int, int], None]


def syllable_edges(seg: Segmentation) -> list[tuple[Partition, Endpoint, Endpoint]]:
    """Derive (partition, source, target) edges for one segmented syllable.

    Each edge is keyed in the partition of its source phone. Bridging edges
    run from the last phone of a non-empty partition to the first phone of
    the next non-empty one, so empty partitions are skipped. START always
    keys the onset table, even when the onset itself is empty.
    """
    walk = [
        (partition, p)
        for partition, part in zip(Partition, seg.parts())
        for p in part
    ]
    if not walk:
        return []

    edges = [(Partition.ONSET, START, phone(walk[0][1]))]
    for i, (partition, p) in enumerate(walk):
        target = phone(walk[i + 1][1]) if i + 1 < len(walk) else STOP
        edges.append((partition, phone(p), target))
    return edges


class GraphBuilder:
    """Owns mutable transition tables until freeze() hands out a graph.

    Counts only ever increase, and the order syllables arrive in does not
    change the final counts.
    """

    def __init__(self, inventory: PhoneInventory = DEFAULT_INVENTORY):
        self.inventory = inventory
        self.accepted = 0
        self.rejected = 0
        self.longest_syllable = 0
        self._tables: list[dict[Endpoint, dict[Endpoint, int]]] = [{} for _ in Partition]
        self._frozen = False

    def _check_open(self) -> None:
        if self._frozen:
            raise RuntimeError("GraphBuilder is frozen; start a new builder for a new corpus")

    def increment(self, partition: Partition, source: Endpoint, target: Endpoint, by: int = 1) -> None:
        """Add `by` to the (source, target) counter in `partition`."""
        self._check_open()
        targets = self._tables[partition].setdefault(source, {})
        targets[target] = targets.get(target, 0) + by

    def add_syllable(self, phones: Sequence[str], word: str = "") -> SegmentOutcome:
        """Segment one syllable and count its edges. Malformed syllables count nothing."""
        self._check_open()
        outcome = segment_syllable(phones, self.inventory)
        if not outcome.ok:
            self.rejected += 1
            logger.debug(f"Skipping malformed syllable {'.'.join(phones)!r} in {word!r}: {outcome.reason}")
            return outcome

        for partition, source, target in syllable_edges(outcome):
            self.increment(partition, source, target)
        self.accepted += 1
        self.longest_syllable = max(self.longest_syllable, len(phones))
        return outcome

    def add_word(self, word: str, syllables: Sequence[Sequence[str]]) -> None:
        for syllable in syllables:
            self.add_syllable(syllable, word)

    def add_corpus(self, corpus: Corpus, progress: ProgressFn | None = None) -> None:
        """Fold a whole corpus in, reporting (processed, total) after each word."""
        items = list(corpus)
        total = len(items)
        logger.info(f"Building sonority graph from {total} words")
        for i, (word, syllables) in enumerate(items, start=1):
            self.add_word(word, syllables)
            if progress is not None:
                progress(i, total)
        logger.info(f"Counted {self.accepted} syllables, skipped {self.rejected} malformed")

    def freeze(self) -> SonorityGraph:
        """Publish the counts as an immutable graph. The builder accepts no more input."""
        self._check_open()
        self._frozen = True
        return freeze_tables(
            self._tables,
            longest_syllable=self.longest_syllable,
            syllable_count=self.accepted,
        )


def build_graph(
    corpus: Corpus,
    inventory: PhoneInventory = DEFAULT_INVENTORY,
    progress: ProgressFn | None = None,
) -> SonorityGraph:
    """Build a SonorityGraph from (word, syllables) pairs.

    Args:
        corpus: Words with their syllables, each syllable a list of phones.
        inventory: Phone tables used by the segmenter.
        progress: Optional observer called as progress(processed, total).

    Returns:
        The frozen graph.
    """
    builder = GraphBuilder(inventory)
    builder.add_corpus(corpus, progress=progress)
    return builder.freeze()


def merge_graphs(*graphs: SonorityGraph) -> SonorityGraph:
    """Sum the counts of several graphs, e.g. built from shards of one corpus."""
    builder = GraphBuilder()
    for graph in graphs:
        for partition in Partition:
            for source, edges in graph.table(partition).items():
                for edge in edges:
                    builder.increment(partition, source, edge.target, by=edge.count)
        builder.accepted += graph.syllable_count
        builder.longest_syllable = max(builder.longest_syllable, graph.longest_syllable)
    return builder.freeze()
