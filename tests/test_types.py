"""Tests for core data types."""

import pytest

from monosyllable.types import (
    START,
    STOP,
    Edge,
    EmptyGraph,
    GenerationBoundExceeded,
    PaletteExhausted,
    Partition,
    SampledSyllable,
    SampleRun,
    freeze_tables,
    graph_from_dict,
    graph_to_dict,
    phone,
)


def test_endpoint_variants():
    assert START.is_start and not START.is_phone
    assert STOP.is_stop and not STOP.is_phone
    assert phone("k").is_phone
    assert phone("k").symbol == "k"
    assert phone("k") == phone("k")
    assert START != STOP


def test_endpoint_str():
    assert str(phone("aʊ")) == "aʊ"
    assert str(START) == "<start>"
    assert str(STOP) == "<stop>"


def test_partition_order():
    assert list(Partition) == [Partition.ONSET, Partition.NUCLEUS, Partition.CODA]
    assert Partition.ONSET < Partition.CODA


def test_freeze_keeps_order_and_counts():
    graph = freeze_tables([
        {START: {phone("k"): 2}, phone("k"): {phone("ɑ"): 1, phone("æ"): 3}},
        {},
        {},
    ])
    assert graph.edges(Partition.ONSET, phone("k")) == (Edge(phone("ɑ"), 1), Edge(phone("æ"), 3))
    assert graph.start_edges() == (Edge(phone("k"), 2),)
    assert graph.edges(Partition.CODA, phone("k")) == ()


def test_freeze_rejects_start_outside_onset():
    with pytest.raises(ValueError):
        freeze_tables([{}, {START: {phone("a"): 1}}, {}])


def test_freeze_rejects_stop_source():
    with pytest.raises(ValueError):
        freeze_tables([{}, {}, {STOP: {phone("a"): 1}}])


def test_freeze_rejects_start_target():
    with pytest.raises(ValueError):
        freeze_tables([{phone("k"): {START: 1}}, {}, {}])


def test_freeze_rejects_non_positive_weight():
    with pytest.raises(ValueError):
        freeze_tables([{START: {phone("a"): 0}}, {}, {}])


def test_freeze_needs_three_tables():
    with pytest.raises(ValueError):
        freeze_tables([{}, {}])


def test_graph_dict_roundtrip():
    graph = freeze_tables(
        [
            {START: {phone("k"): 2, phone("æ"): 1}, phone("k"): {phone("æ"): 2}},
            {phone("æ"): {phone("t"): 2, STOP: 1}},
            {phone("t"): {STOP: 2}},
        ],
        longest_syllable=3,
        syllable_count=3,
    )
    restored = graph_from_dict(graph_to_dict(graph))
    assert restored.counts() == graph.counts()
    assert restored.longest_syllable == 3
    assert restored.syllable_count == 3
    assert [e.target for e in restored.start_edges()] == [phone("k"), phone("æ")]


def test_outcome_flags():
    assert SampledSyllable(("k", "æ", "t")).ok is True
    assert EmptyGraph().ok is False
    assert PaletteExhausted().ok is False
    assert GenerationBoundExceeded((), 4).ok is False


def test_outcome_str():
    assert str(SampledSyllable(("k", "æ", "t"))) == "kæt"
    assert "onset" in str(PaletteExhausted((), Partition.ONSET))
    assert "4" in str(GenerationBoundExceeded(("d",), 4))


def test_sample_run_split():
    graph = freeze_tables([{}, {}, {}])
    ok = SampledSyllable(("æ",))
    run = SampleRun(graph=graph, outcomes=[ok, EmptyGraph()])
    assert run.syllables == [ok]
    assert run.failures == [EmptyGraph()]
