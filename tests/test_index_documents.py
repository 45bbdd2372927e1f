import json

import pytest

from wordplay.app.data import IndexFileRepository
from wordplay.core import (
    DictionaryStore,
    Difficulty,
    IndexBuilder,
    SourceUnreadableError,
    WordRecord,
    indices_from_documents,
    indices_to_documents,
)


@pytest.fixture
def indices(word_records, phonetic_records, definition_records):
    return IndexBuilder().build(word_records, phonetic_records, definition_records)


def test_documents_use_plain_serializable_shapes(indices):
    documents = indices_to_documents(indices)

    assert set(documents) == {
        "words-by-difficulty",
        "words-by-length",
        "phonetics",
        "rhyme-groups",
        "definitions",
    }
    assert documents["words-by-difficulty"]["easy"][0] == {
        "word": "cat",
        "length": 3,
        "difficulty": "easy",
    }
    assert documents["words-by-length"]["3"] == ["cat", "hat", "bat"]
    assert documents["phonetics"][0] == {
        "word": "cat",
        "phonetic": "K AE1 T",
        "sounds": ["K", "AE1", "T"],
    }
    assert documents["rhyme-groups"] == {"AE1 T": ["cat", "hat", "bat", "mat"]}
    assert documents["definitions"][0]["partOfSpeech"] == "n."
    assert "partOfSpeech" not in documents["definitions"][1]
    json.dumps(documents)


def test_documents_round_trip_losslessly(indices):
    restored = indices_from_documents(indices_to_documents(indices))

    assert restored == indices


def test_definitions_document_is_optional(indices):
    documents = indices_to_documents(indices, include_definitions=False)

    restored = indices_from_documents(documents)

    assert "definitions" not in documents
    assert restored.definitions == ()
    assert restored.valid_words == indices.valid_words


def test_loaded_rhyme_groups_are_revalidated(indices):
    documents = indices_to_documents(indices)
    documents["rhyme-groups"]["EH1 D"] = ["red", "red", "bed"]

    restored = indices_from_documents(documents)

    assert "EH1 D" not in restored.rhyme_groups
    assert "AE1 T" in restored.rhyme_groups


def test_store_from_documents(indices):
    store = DictionaryStore.from_documents(indices_to_documents(indices))

    assert store.by_length(3) == ("cat", "hat", "bat")
    assert store.rhymes_of("hat") == ["cat", "bat", "mat"]


def test_repository_writes_one_file_per_document(tmp_path, indices):
    repository = IndexFileRepository(tmp_path / "data")

    written = repository.write(indices)

    assert sorted(path.name for path in written) == [
        "definitions.json",
        "phonetics.json",
        "rhyme-groups.json",
        "words-by-difficulty.json",
        "words-by-length.json",
    ]
    assert repository.exists()
    assert repository.read() == indices


def test_repository_allows_missing_definitions(tmp_path, indices):
    repository = IndexFileRepository(tmp_path)
    repository.write(indices)
    (tmp_path / "definitions.json").unlink()

    restored = repository.read()

    assert restored.definitions == ()
    assert restored.by_length == indices.by_length


def test_repository_missing_required_file_raises(tmp_path, indices):
    repository = IndexFileRepository(tmp_path)
    repository.write(indices)
    (tmp_path / "phonetics.json").unlink()

    with pytest.raises(SourceUnreadableError) as excinfo:
        repository.read()

    assert excinfo.value.source.endswith("phonetics.json")
    assert not repository.exists()


def test_repository_rejects_invalid_json(tmp_path, indices):
    repository = IndexFileRepository(tmp_path)
    repository.write(indices)
    (tmp_path / "rhyme-groups.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(SourceUnreadableError):
        repository.read()


def test_repository_rejects_undecodable_bytes(tmp_path, indices):
    repository = IndexFileRepository(tmp_path)
    repository.write(indices)
    (tmp_path / "phonetics.json").write_bytes(b"[\xff\xfe]")

    with pytest.raises(SourceUnreadableError) as excinfo:
        repository.read()

    assert "invalid UTF-8" in excinfo.value.reason
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_stored_word_fields_are_rederived_from_the_word():
    record = WordRecord.from_dict({"word": "Cat", "length": 9, "difficulty": "hard"})

    assert record == WordRecord("cat", 3, Difficulty.EASY)
