"""Sonority graph: learn syllable structure from a corpus and sample from it."""

import logging
import random
from pathlib import Path
from typing import Iterable

from monosyllable.cache import file_hash, get_cached_graph, store_graph_cache
from monosyllable.corpus import load_corpus
from monosyllable.sonority.builder import build_graph
from monosyllable.sonority.sampler import sample_many
from monosyllable.types import SampleRun, SonorityGraph

logger = logging.getLogger(__name__)


def _log_progress(processed: int, total: int) -> None:
    """Log roughly every tenth of the corpus."""
    step = max(total // 10, 1)
    if processed % step == 0 or processed == total:
        logger.info(f"  {processed}/{total} words ({100 * processed // max(total, 1)}%)")


def load_graph(corpus_path: str | Path, use_cache: bool = True) -> SonorityGraph:
    """Build the graph for a corpus file, reusing a cached build when possible."""
    corpus_path = Path(corpus_path)
    if not corpus_path.exists():
        raise FileNotFoundError(f"Corpus not found: {corpus_path}")

    corpus_hash = file_hash(corpus_path) if use_cache else None
    if corpus_hash is not None:
        cached = get_cached_graph(corpus_hash)
        if cached is not None:
            return cached

    graph = build_graph(load_corpus(corpus_path), progress=_log_progress)
    if corpus_hash is not None:
        store_graph_cache(corpus_hash, graph)
    return graph


def process(
    corpus_path: str | Path,
    count: int = 10,
    palette: Iterable[str] | None = None,
    seed: int | None = None,
    max_phones: int | None = None,
    use_cache: bool = True,
) -> SampleRun:
    """Run the sampling pipeline.

    Args:
        corpus_path: Syllabified-IPA JSON corpus.
        count: Number of syllables to draw.
        palette: Restrict generation to these phones (None = unconstrained).
        seed: RNG seed for reproducible output.
        max_phones: Step bound per syllable (default: derived from the corpus).
        use_cache: Use file-based caching of the built graph.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    graph = load_graph(corpus_path, use_cache=use_cache)
    logger.info(
        f"Graph: {graph.syllable_count} syllables, {graph.edge_count()} edges, "
        f"longest syllable {graph.longest_syllable} phones"
    )

    rng = random.Random(seed)
    outcomes = sample_many(graph, count, rng, palette=palette, max_phones=max_phones)
    run = SampleRun(graph=graph, outcomes=outcomes)
    if run.failures:
        logger.info(f"{len(run.failures)} of {count} samples failed")
    return run
