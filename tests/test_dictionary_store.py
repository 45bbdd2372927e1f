import logging
import random

import pytest

from wordplay.core import Difficulty, DictionaryStore, NotLoadedError, WordRecord


def test_is_valid_matches_difficulty_buckets(store, word_records):
    bucketed = {
        record.word
        for level in Difficulty
        for record in store.by_difficulty_level(level)
    }

    assert bucketed == {record.word for record in word_records}
    for word in bucketed:
        assert store.is_valid(word)
    assert store.is_valid("CAT")
    assert not store.is_valid("mat")


def test_by_length_exact_bucket_and_missing_bucket(store):
    assert store.by_length(3) == ("cat", "hat", "bat")
    assert store.by_length(42) == ()


def test_by_length_range_orders_by_length_then_insertion(store):
    assert store.by_length_range(1, 3) == ["a", "cat", "hat", "bat"]
    assert store.by_length_range(4, 2) == []


def test_random_sample_is_distinct_and_bounded(store):
    sample = store.random_sample(2, level=Difficulty.EASY)

    assert len(sample) == 2
    assert len(set(sample)) == 2
    assert set(sample) <= {"cat", "hat", "bat", "a"}
    assert sorted(store.random_sample(10, length=3)) == ["bat", "cat", "hat"]
    assert store.random_sample(3, length=42) == []


def test_random_sample_requires_exactly_one_bucket(store):
    with pytest.raises(ValueError):
        store.random_sample(1)
    with pytest.raises(ValueError):
        store.random_sample(1, level="easy", length=3)


def test_random_sample_uses_injected_rng(word_records):
    first = DictionaryStore.from_records(word_records, rng=random.Random(7))
    second = DictionaryStore.from_records(word_records, rng=random.Random(7))

    assert first.random_sample(4, length=5) == second.random_sample(4, length=5)


def test_rhymes_exclude_query_word(store):
    assert store.rhymes_of("Cat") == ["hat", "bat", "mat"]


@pytest.mark.parametrize("word", ["lemon", "zygon", "a", ""])
def test_rhymes_empty_when_no_group(store, word):
    assert store.rhymes_of(word) == []


def test_random_rhyme_group(store):
    assert store.random_rhyme_group() == ("AE1 T", ("cat", "hat", "bat", "mat"))
    assert store.random_rhyme_group(min_words=5) is None


def test_definitions_lookup(store):
    record = store.definition_of("CAT")

    assert record is not None
    assert record.part_of_speech == "n."
    assert [entry.word for entry in store.all_definitions_of("hat")] == ["hat"]
    assert store.definition_of("dog") is None
    assert store.all_definitions_of("dog") == []


def test_words_formable_from_uses_letter_multiset(store):
    assert set(store.words_formable_from("TACS")) == {"cat"}
    assert set(store.words_formable_from("eaglex", 5)) == {"eagle"}
    assert store.words_formable_from("ab", 3) == []


def test_words_formable_from_is_idempotent(store):
    first = store.words_formable_from("speedraste", 4)
    second = store.words_formable_from("speedraste", 4)

    assert set(first) == set(second)
    assert {"speed", "erase", "stare", "tears"} <= set(first)


def test_words_for_word_search_respects_max_length(store):
    assert store.words_for_word_search(Difficulty.HARD, 5) == []
    assert len(store.words_for_word_search("easy", 2)) == 2


def test_sample_words_are_first_easy_words(store):
    assert store.sample_words(2) == ["cat", "hat"]


def test_stats(store):
    stats = store.stats()

    assert stats.total_words == 19
    assert stats.words_by_difficulty == {"easy": 4, "medium": 14, "hard": 1}
    assert stats.phonetics_count == 7
    assert stats.rhyme_groups_count == 1
    assert stats.definitions_count == 2


def test_unloaded_store_raises_not_loaded():
    store = DictionaryStore.unloaded()

    assert not store.loaded
    with pytest.raises(NotLoadedError):
        store.by_difficulty_level("easy")
    with pytest.raises(NotLoadedError):
        store.by_length(5)
    with pytest.raises(RuntimeError):
        store.rhymes_of("cat")


def test_unloaded_validity_check_warns(caplog):
    caplog.set_level(logging.WARNING, logger="wordplay.core.dictionary_store")

    assert DictionaryStore.unloaded().is_valid("cat") is False
    assert any("before dictionary load" in record.message for record in caplog.records)


def test_from_records_builds_ready_store():
    store = DictionaryStore.from_records([WordRecord.from_word("Hello")])

    assert store.loaded
    assert store.is_valid("hello")
    assert store.rhyme_groups() == {}
