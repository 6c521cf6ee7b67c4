"""IPA phone inventory used to classify syllable segments."""

from dataclasses import dataclass

VOWELS = frozenset({
    "a",
    "ɑ",   # ɑ or ɒ
    "æ",
    "ʌ",
    "ɔ",
    "aʊ",
    "əɹ",  # ɚ
    "ə",
    "aɪ",
    "ɛ",
    "ɛɹ",  # ɝ
    "eɪ",
    "ɪ",
    "ɨ",
    "i",
    "oʊ",
    "ɔɪ",
    "ʊ",
    "u",
    "ʉ",
})

CONSONANTS_OR_EXTRA = frozenset({
    "b",
    "tʃ",
    "d",
    "ð",
    "ɾ",
    "l̩",
    "m̩",
    "n̩",
    "f",
    "ɡ",
    "h",
    "dʒ",
    "k",
    "l",
    "m",
    "n",
    "ŋ",
    "ɾ̃",
    "p",
    "ʔ",
    "ɹ",
    "s",
    "ʃ",
    "t",
    "θ",
    "v",
    "w",
    "ʍ",
    "j",
    "z",
    "ʒ",
})


@dataclass(frozen=True)
class PhoneInventory:
    """Two disjoint phone sets: nucleus vowels and everything else."""
    vowels: frozenset[str] = VOWELS
    consonants: frozenset[str] = CONSONANTS_OR_EXTRA

    def __post_init__(self):
        overlap = self.vowels & self.consonants
        if overlap:
            raise ValueError(f"phones cannot be both vowel and consonant: {sorted(overlap)}")

    def is_vowel(self, p: str) -> bool:
        return p in self.vowels

    def is_consonant(self, p: str) -> bool:
        return p in self.consonants

    def __contains__(self, p: str) -> bool:
        return p in self.vowels or p in self.consonants

    @property
    def symbols(self) -> frozenset[str]:
        return self.vowels | self.consonants

    @property
    def longest_symbol(self) -> int:
        return max((len(s) for s in self.symbols), default=1)


DEFAULT_INVENTORY = PhoneInventory()
