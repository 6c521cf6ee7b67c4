"""File-based caching of built sonority graphs."""

import hashlib
import json
import logging
import os
import tempfile
from pathlib import Path

from monosyllable.types import SonorityGraph, graph_from_dict, graph_to_dict

logger = logging.getLogger(__name__)

CACHE_DIR = Path(os.environ.get("MONOSYLLABLE_CACHE_DIR", "~/.cache/monosyllable")).expanduser()

# Bump when the on-disk graph layout or the edge derivation changes
GRAPH_FORMAT_VERSION = 1


def file_hash(path: Path) -> str:
    """Compute SHA-256 hash of a file's contents."""
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _atomic_write(target: Path, data: bytes) -> None:
    """Write data to target atomically via temp file + rename."""
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=target.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp, target)
    except Exception:
        if os.path.exists(tmp):
            os.unlink(tmp)
        raise


def _graph_cache_path(corpus_hash: str) -> Path:
    return CACHE_DIR / "graph" / f"{corpus_hash}_v{GRAPH_FORMAT_VERSION}.json"


def get_cached_graph(corpus_hash: str) -> SonorityGraph | None:
    """Return the cached graph for a corpus, or None if not cached."""
    path = _graph_cache_path(corpus_hash)
    if path.exists():
        try:
            graph = graph_from_dict(json.loads(path.read_text(encoding="utf-8")))
            logger.info(f"Cache hit: sonority graph ({corpus_hash[:12]}...)")
            return graph
        except (json.JSONDecodeError, OSError, KeyError, TypeError, ValueError):
            return None
    return None


def store_graph_cache(corpus_hash: str, graph: SonorityGraph) -> Path:
    """Store a built graph in the cache. Returns the cache path."""
    path = _graph_cache_path(corpus_hash)
    payload = json.dumps(graph_to_dict(graph), ensure_ascii=False)
    _atomic_write(path, payload.encode("utf-8"))
    logger.info(f"Cached sonority graph ({corpus_hash[:12]}...)")
    return path
