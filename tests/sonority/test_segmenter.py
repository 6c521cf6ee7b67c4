"""Tests for onset/nucleus/coda segmentation."""

from monosyllable.phones import PhoneInventory
from monosyllable.sonority.segmenter import segment_syllable
from monosyllable.types import MalformedSyllable, Segmentation


class TestSegmentSyllable:
    def test_cvc(self):
        seg = segment_syllable(["k", "æ", "t"])
        assert seg == Segmentation(("k",), ("æ",), ("t",))

    def test_reaches_coda(self):
        """The coda branch is reachable: consonants after the vowel land in coda."""
        seg = segment_syllable(["s", "t", "ɹ", "ɛ", "ŋ", "k", "θ", "s"])
        assert seg.ok
        assert seg.onset == ("s", "t", "ɹ")
        assert seg.nucleus == ("ɛ",)
        assert seg.coda == ("ŋ", "k", "θ", "s")

    def test_no_onset(self):
        seg = segment_syllable(["æ", "t"])
        assert seg.onset == ()
        assert seg.nucleus == ("æ",)
        assert seg.coda == ("t",)

    def test_no_coda(self):
        seg = segment_syllable(["b", "oʊ"])
        assert seg.onset == ("b",)
        assert seg.nucleus == ("oʊ",)
        assert seg.coda == ()

    def test_vowel_only(self):
        seg = segment_syllable(["aɪ"])
        assert seg.parts() == ((), ("aɪ",), ())

    def test_vowel_run_is_one_nucleus(self):
        seg = segment_syllable(["h", "a", "ɪ", "d"])
        assert seg.nucleus == ("a", "ɪ")
        assert seg.coda == ("d",)


class TestMalformed:
    def test_all_consonants(self):
        seg = segment_syllable(["s", "t"])
        assert isinstance(seg, MalformedSyllable)
        assert seg.ok is False
        assert seg.phones == ("s", "t")
        assert "no vowel" in seg.reason

    def test_empty(self):
        seg = segment_syllable([])
        assert isinstance(seg, MalformedSyllable)

    def test_vowel_after_coda(self):
        seg = segment_syllable(["k", "æ", "t", "i"])
        assert isinstance(seg, MalformedSyllable)
        assert "after coda" in seg.reason

    def test_unknown_phone_in_onset(self):
        seg = segment_syllable(["x", "æ"])
        assert isinstance(seg, MalformedSyllable)
        assert "unknown" in seg.reason

    def test_unknown_phone_after_nucleus(self):
        seg = segment_syllable(["k", "æ", "x"])
        assert isinstance(seg, MalformedSyllable)

    def test_never_raises(self):
        for phones in (["?"], ["", "a"], ["a", "b", "a"], ["ʔ"] * 20):
            assert segment_syllable(phones).ok is False


class TestCustomInventory:
    def test_uses_given_tables(self):
        inventory = PhoneInventory(vowels=frozenset({"a", "o"}), consonants=frozenset({"p", "x"}))
        seg = segment_syllable(["x", "o", "p"], inventory)
        assert seg == Segmentation(("x",), ("o",), ("p",))

    def test_default_symbol_unknown_to_custom_tables(self):
        inventory = PhoneInventory(vowels=frozenset({"a"}), consonants=frozenset({"p"}))
        assert segment_syllable(["k", "a"], inventory).ok is False
