"""Read syllabified IPA pronunciations into (word, syllables) pairs."""

import json
import logging
from pathlib import Path

from monosyllable.phones import DEFAULT_INVENTORY, PhoneInventory

logger = logging.getLogger(__name__)

SYLLABLE_SEPARATOR = "|"

# Marks that carry no segment of their own
_IGNORED = set(" \t\nˈˌ.'")

# Spellings folded onto the inventory's symbols
_EQUIVALENTS: dict[str, str] = {
    "ɚ": "əɹ",
    "ɝ": "ɛɹ",
    "ɒ": "ɑ",
    "g": "ɡ",
    "r": "ɹ",
}


def tokenize_ipa(text: str, inventory: PhoneInventory = DEFAULT_INVENTORY) -> list[str]:
    """Split an IPA string into inventory phones, longest match first.

    Multi-character phones such as "aʊ", "tʃ" or "əɹ" win over their
    single-character prefixes. Characters that start no known phone come
    back as single-character phones, which the segmenter rejects later.
    """
    text = "".join(_EQUIVALENTS.get(ch, ch) for ch in text if ch not in _IGNORED)
    symbols = inventory.symbols
    longest = inventory.longest_symbol

    phones = []
    i = 0
    while i < len(text):
        for size in range(min(longest, len(text) - i), 0, -1):
            candidate = text[i:i + size]
            if candidate in symbols:
                phones.append(candidate)
                i += size
                break
        else:
            phones.append(text[i])
            i += 1
    return phones


def parse_syllabified(
    pronunciation: str,
    inventory: PhoneInventory = DEFAULT_INVENTORY,
) -> list[list[str]]:
    """Turn "bɪz|nɪs" into [["b", "ɪ", "z"], ["n", "ɪ", "s"]]."""
    syllables = []
    for piece in pronunciation.split(SYLLABLE_SEPARATOR):
        phones = tokenize_ipa(piece, inventory)
        if phones:
            syllables.append(phones)
    return syllables


def corpus_from_mapping(
    pronunciations: dict,
    inventory: PhoneInventory = DEFAULT_INVENTORY,
) -> list[tuple[str, list[list[str]]]]:
    """Convert {word: "syl|syl"} into (word, syllables) pairs, keeping order."""
    corpus = []
    for word, pronunciation in pronunciations.items():
        if not isinstance(pronunciation, str):
            raise ValueError(
                f"pronunciation for {word!r} must be a string, got {type(pronunciation).__name__}"
            )
        corpus.append((word, parse_syllabified(pronunciation, inventory)))
    return corpus


def load_corpus(
    path: str | Path,
    inventory: PhoneInventory = DEFAULT_INVENTORY,
) -> list[tuple[str, list[list[str]]]]:
    """Load a syllabified-IPA JSON file ({"business": "bɪz|nɪs", ...}).

    Raises:
        FileNotFoundError: if the file does not exist.
        ValueError: if the JSON is not an object of strings.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Corpus not found: {path}")

    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object of word -> syllabified IPA")

    corpus = corpus_from_mapping(data, inventory)
    logger.info(f"Loaded {len(corpus)} words from {path.name}")
    return corpus
