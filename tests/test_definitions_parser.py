import pytest

from wordplay.core import DefinitionRecord, WebsterDefinitionParser
from wordplay.core.definitions import (
    clean_definition_text,
    is_definition_marker,
    is_headword,
    scan_entry,
)


ABANDON_ENTRY = [
    "ABANDON",
    'A*ban"don, v. t.',
    "",
    "Defn: To give up wholly.",
    "",
    "1. To cast away. [Obs.]",
    "2. To resign; to",
    "surrender.",
    "",
    "CAT",
    "Cat, n.",
    "Defn: A feline. [Etym: Foo]",
]


def _parser():
    return WebsterDefinitionParser(header_lines=0)


@pytest.mark.parametrize(
    "line, expected",
    [
        ("ABANDON", True),
        ("JACK-O'-LANTERN", True),
        ("ICE CREAM", True),
        ("", False),
        ("Cat", False),
        ("A*BAN", False),
        ("1. TO CAST", False),
    ],
)
def test_is_headword(line, expected):
    assert is_headword(line) is expected


def test_definition_markers():
    assert is_definition_marker("Defn: To give up.")
    assert is_definition_marker("12. Something")
    assert not is_definition_marker("Something 1.")


def test_clean_definition_text_collapses_and_rewrites_brackets():
    text = clean_definition_text(["To cast   away.", " [Obs.]", "See [Note]"])

    assert text == "To cast away. (Obsolete) See"


def test_scan_entry_collects_paragraphs_until_next_headword():
    scan = scan_entry(ABANDON_ENTRY, 0)

    assert scan.entry == DefinitionRecord(
        word="abandon",
        definitions=(
            "To give up wholly.",
            "To cast away. (Obsolete)",
            "To resign; to surrender.",
        ),
        part_of_speech="v",
        pronunciation='A*ban"don',
    )
    assert scan.next_index == 9


def test_parse_lines_emits_every_entry():
    result = _parser().parse_lines(ABANDON_ENTRY)

    assert [record.word for record in result.records] == ["abandon", "cat"]
    cat = result.records[1]
    assert cat.definitions == ("A feline.",)
    assert cat.part_of_speech == "n"
    assert cat.pronunciation == "Cat"


def test_unmatched_pronunciation_line_is_left_for_body_scan():
    lines = ["ABACK", "Defn: Backward.", "", "ABAFT", "Somewhere aft", "Defn: Behind."]

    result = _parser().parse_lines(lines)

    aback, abaft = result.records
    assert aback.pronunciation is None
    assert aback.part_of_speech is None
    assert aback.definitions == ("Backward.",)
    assert abaft.pronunciation is None
    assert abaft.definitions == ("Behind.",)


def test_entries_without_definitions_are_dropped_and_counted():
    lines = [
        "EMPTY",
        "Empty, a.",
        "",
        "Some text without a marker",
        "CAT",
        "Cat, n.",
        "Defn: A feline.",
    ]

    result = _parser().parse_lines(lines)

    assert [record.word for record in result.records] == ["cat"]
    assert result.malformed == 1
    assert result.parsed == 1


def test_repeated_headwords_fold_into_first_entry():
    lines = [
        "CAT",
        "Cat, n.",
        "Defn: First sense.",
        "",
        "DOG",
        "Dog, n.",
        "Defn: Canine.",
        "",
        "CAT",
        "Cat, v.",
        "Defn: Second sense.",
    ]

    result = _parser().parse_lines(lines)

    assert [record.word for record in result.records] == ["cat", "dog"]
    cat = result.records[0]
    assert cat.definitions == ("First sense.", "Second sense.")
    assert cat.part_of_speech == "n"
    assert result.parsed == 3


def test_header_lines_are_skipped_unconditionally():
    lines = ["PROJECT GUTENBERG", "Defn: not a definition", "CAT", "Cat, n.", "Defn: A feline."]

    result = WebsterDefinitionParser(header_lines=2).parse_lines(lines)

    assert [record.word for record in result.records] == ["cat"]
    assert result.skipped == 2
    assert result.total_lines == 5


def test_text_without_headwords_yields_nothing():
    result = _parser().parse_lines(["just prose", "more prose"])

    assert result.records == []
    assert result.malformed == 0


def test_parse_reads_file(tmp_path):
    path = tmp_path / "webster.txt"
    path.write_text("\n".join(["header"] * 27 + ABANDON_ENTRY), encoding="utf-8")

    result = WebsterDefinitionParser().parse(path)

    assert [record.word for record in result.records] == ["abandon", "cat"]
