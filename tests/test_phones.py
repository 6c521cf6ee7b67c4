"""Tests for the phone inventory."""

import pytest

from monosyllable.phones import CONSONANTS_OR_EXTRA, DEFAULT_INVENTORY, VOWELS, PhoneInventory


def test_tables_disjoint():
    assert not VOWELS & CONSONANTS_OR_EXTRA


def test_table_sizes():
    assert len(VOWELS) == 20
    assert len(CONSONANTS_OR_EXTRA) == 31


def test_multi_character_phones():
    assert "aʊ" in VOWELS
    assert "əɹ" in VOWELS
    assert "tʃ" in CONSONANTS_OR_EXTRA
    assert "l̩" in CONSONANTS_OR_EXTRA


def test_classification():
    assert DEFAULT_INVENTORY.is_vowel("æ")
    assert DEFAULT_INVENTORY.is_consonant("k")
    assert "x" not in DEFAULT_INVENTORY
    assert "j" in DEFAULT_INVENTORY and not DEFAULT_INVENTORY.is_vowel("j")


def test_longest_symbol():
    assert DEFAULT_INVENTORY.longest_symbol == 2


def test_overlap_rejected():
    with pytest.raises(ValueError):
        PhoneInventory(vowels=frozenset({"a", "w"}), consonants=frozenset({"w"}))
